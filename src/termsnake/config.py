from __future__ import annotations

# Board sides must be strictly greater than this.
MIN_BOARD_SIDE = 4

BOARD_WIDTH = 16
BOARD_HEIGHT = 16
INITIAL_LENGTH = 4
PERIODIC_WORLD = True

TICK_MS = 500

# Ring capacity is CAPACITY_FACTOR * board area.
CAPACITY_FACTOR = 2
