GRID_ROWS = 10
GRID_COLS = 17
TOTAL_APPLES = GRID_ROWS * GRID_COLS

# A clear happens when the selected values add up to exactly this.
TARGET_SUM = 10
MAX_APPLE_VALUE = 9

# Seconds per game.
GAME_DURATION = 120

# Countdown granularity in seconds.
TICK_INTERVAL = 1.0

# Left mouse button as reported by arcade (arcade.MOUSE_BUTTON_LEFT).
MOUSE_BUTTON_LEFT = 1

# Board layout (pixels). The board is scaled to fit within the percentage caps.
CELL_SIZE = 40
CELL_PADDING = 4
BOTTOM_MARGIN = 90
TOP_MARGIN = 70
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.85
MIN_CELL_SIZE = 16

# HUD and buttons
BUTTON_WIDTH = 200
BUTTON_HEIGHT = 52
HUD_FONT_SIZE = 22
CELL_FONT_RATIO = 0.45
GAME_OVER_FONT_SIZE = 30
SELECTION_BORDER_WIDTH = 2
SELECTION_OPACITY = 0.3
SELECTION_INDICATOR_OFFSET = 10
SELECTION_INDICATOR_TOP_OFFSET = 30
