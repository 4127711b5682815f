"""
Logging Configuration
All logging-related settings for showlog.
"""

import os

# -------------------------------------------------------
# Logging configuration
# -------------------------------------------------------

# Verbosity levels (on-screen log bar only; the file gets everything):
#   0 = ERROR  → only errors
#   1 = WARN   → warnings and errors
#   2 = INFO   → normal info (default)
LOG_OFF = False
LOG_LEVEL = 2
VERBOSE_LOG = False
DEBUG_LOG = False

# Master debug flag: must be True for [DEBUG …] lines to reach the file
DEBUG = True

# Background file writer
LOG_FILE_ENABLED = False
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "routing_log.txt")
LOG_QUEUE_SIZE = 512

# Lines kept in memory for showlog.recent()
LOG_HISTORY_SIZE = 200

# Log text color (hex)
LOG_TEXT_COLOR = "#FFFFFF"
LOG_BAR_COLOR = "#0A0A0A"
