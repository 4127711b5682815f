"""
Display Configuration
Window size and frame timing for the routing demo.
"""

WINDOW_TITLE = "I/O Routing"
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 200

# Frame rate of the demo event loop
FPS = 30

# Bottom log bar
LOG_BAR_HEIGHT = 20
LOG_FONT_NAME = "Courier"
LOG_FONT_SIZE = 14
