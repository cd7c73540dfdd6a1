GRID_ROWS = 4
GRID_COLS = 4
# 2 ** 11 == 2048
TARGET_TILE_LEVEL = 11
INITIAL_TILES = 2

# Spawn draw: randrange(10) < 9 gives level 1, otherwise level 2.
SPAWN_DRAW_RANGE = 10
SPAWN_HIGH_LEVEL_THRESHOLD = 9

# Seconds for one snapshot transition when a single snapshot is queued.
BASE_ANIMATION_DURATION = 0.2
# Fraction of a transition spent sliding; the rest is spent on spawn/merge scaling.
MOVING_PHASE_END = 0.5

# Real time during which key presses are dropped after a win.
WIN_INPUT_BLOCK_SECONDS = 2.5

OVERLAY_SMOOTHING_WEIGHT = 24

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
WINDOW_TITLE = "2048"

# Board maximum footprint relative to window.
BOARD_MAX_WIDTH_PCT = 0.7
BOARD_MAX_HEIGHT_PCT = 0.7
MARGIN_TO_TILE_RATIO = 1 / 8

# Score panel and restart button sit above the board.
HEADER_GAP = 16
SCORE_PANEL_WIDTH = 120
SCORE_PANEL_HEIGHT = 56
RESTART_BUTTON_WIDTH = 120
RESTART_BUTTON_HEIGHT = 40

# arcade.key values (pyglet symbols); kept numeric so systems stay importable headless.
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_R = 114

MOUSE_BUTTON_LEFT = 1
