DEFAULT_BOARD_SIZE = 5

# Reference terminal size the table rectangle below was authored against.
DESIGN_WIDTH = 80
DESIGN_HEIGHT = 24
# (x, y, width, height) of the board table at design resolution.
TABLE_RECT = (18.0, 1.0, 42.0, 21.0)
# Vertical room reserved for borders and the HUD when sizing blocks.
BLOCK_HEIGHT_MARGIN = 2.5

# Generation presses are drawn from [MIN, MAX] * N^2.
GENERATION_MIN_FRACTION = 0.2
GENERATION_MAX_FRACTION = 0.8

# Keyboard coordinates use one letter per row.
MAX_KEYBOARD_ROWS = 26
COMMAND_PREFIX = ":"
BACKSPACE_SIGNAL = "\x00"

COMMAND_QUIT = "Q"
COMMAND_RESET = "R"
COMMAND_TOGGLE_MODE = "K"

MOUSE_BUTTON_LEFT = 1

POLL_TIMEOUT_MS = 30
