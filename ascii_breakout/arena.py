import enum

# --- Board geometry ---
MAX_X = 67  # Right wall column
MAX_Y = 24  # Lowest drawn wall row
PAD_Y = 23  # Paddle row
PAD_W = 3

# --- Blocks ---
BLOCK_W = 17
BLOCK_H = 4
BLOCK_ROWS = 2
BLOCK_COLS = 4

# --- Timing ---
DELAY = 0.03  # Seconds per tick
BALL_DELAY = 4  # Ticks per ball move

# --- Starting state ---
PAD_START_X = 20
BALL_START = (0, BLOCK_ROWS * BLOCK_H)  # (x, y)
BALL_START_DIR = (1, 1)

PAD_MIN_X = 1
PAD_MAX_X = MAX_X - PAD_W

BALL_CHAR = "o"
PADDLE_CHARS = "-" * PAD_W


class Intent(enum.Enum):
    NONE = 0
    LEFT = -1
    RIGHT = 1


def move_paddle(pad_x, intent):
    """Step the paddle one cell toward the intent, clamped to [PAD_MIN_X, PAD_MAX_X]."""
    return min(max(pad_x + intent.value, PAD_MIN_X), PAD_MAX_X)


def draw_board(sink):
    # Ceiling
    sink(0, 0, ".")
    for x in range(1, MAX_X):
        sink(0, x, "-")
    sink(0, MAX_X, ".")

    # Walls
    for y in range(1, MAX_Y + 1):
        sink(y, 0, "|")
        sink(y, MAX_X, "|")
