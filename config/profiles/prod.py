"""
Production Profile - Default Settings
Quiet bar, no log file.
"""

FPS = 30

LOG_LEVEL = 1
DEBUG = False
VERBOSE_LOG = False
DEBUG_LOG = False
LOG_FILE_ENABLED = False
