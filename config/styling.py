"""
Visual Styling Configuration
Colors and fonts for the routing menus.
"""

# ================== MENU STYLING ==================

MENU_WIDTH = 200
MENU_HEIGHT = 32
MENU_SPACING = 16
MENU_FONT_SIZE = 18
MENU_BORDER_RADIUS = 6

# --- Menu Colors (Active) ---
MENU_FILL_COLOR = "#3C3C3C"
MENU_OUTLINE_COLOR = "#646464"
MENU_TEXT_COLOR = "#FFFFFF"
MENU_ARROW_COLOR = "#FF8000"

# --- Menu Colors (Inactive) ---
MENU_DISABLED_FILL = "#1E1E1E"
MENU_DISABLED_TEXT = "#646464"

# Background behind the menus
BACKGROUND_COLOR = "#101418"
