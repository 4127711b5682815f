"""
Development Profile - Debug-Friendly Settings
Verbose logging to file and on screen.
"""

FPS = 30

LOG_LEVEL = 2           # INFO level on the bar
DEBUG = True
VERBOSE_LOG = True
DEBUG_LOG = True
LOG_FILE_ENABLED = True
