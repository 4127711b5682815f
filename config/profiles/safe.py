"""
Safe Mode Profile - Minimal Features
For troubleshooting or low-resource scenarios.
"""

FPS = 10

# Minimal logging (errors only)
LOG_LEVEL = 0
DEBUG = False
VERBOSE_LOG = False
DEBUG_LOG = False
LOG_FILE_ENABLED = False
