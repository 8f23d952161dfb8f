# ============================================================================
# PIT GEOMETRY
# ============================================================================
GRID_COLUMNS = 6
GRID_ROWS = 13
SHAFT_SIZE = 3

# Spawn cell of the base (bottom) block of a fresh column.
STARTING_X = 2
STARTING_Y = 0


# ============================================================================
# TIMING
# ============================================================================
# Automatic fall interval of the column; the cascade stages tick at the same pace.
FALL_SECONDS = 1.0
# Highlight toggles before matched blocks are cleared (on, off, on).
BLINK_TICKS = 3


# ============================================================================
# DISPLAY CODES
# ============================================================================
EMPTY_CODE = -1
HIGHLIGHT_CODE = 6


# ============================================================================
# WINDOW
# ============================================================================
TILE_SIZE = 32
BOARD_MARGIN = 16
# Seconds the final board stays on screen after the pit tops out.
GAME_OVER_LINGER = 1.0
