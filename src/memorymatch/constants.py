DEFAULT_DIFFICULTY = "medium"

# Seconds a mismatched pair stays visible before flipping back.
MISMATCH_DELAY = 1.0
TIMER_STEP = 1.0

LEADERBOARD_KEY = "memoryMatchLeaderboard"
MAX_LEADERBOARD_ENTRIES = 10

HIDDEN_FACE = "❓"

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 720
BOTTOM_MARGIN = 20
TOP_BAR_HEIGHT = 96

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.60
BOARD_MAX_HEIGHT_PCT = 0.85
CARD_PADDING = 6
MIN_CARD_SIZE = 24

# Leaderboard column on the right side of the board.
SIDE_PANEL_MIN_WIDTH = 240
SIDE_GAP = 30

# Control buttons across the top bar.
CONTROL_BUTTON_WIDTH = 130.0
CONTROL_BUTTON_HEIGHT = 40.0
CONTROL_BUTTON_GAP = 14.0
