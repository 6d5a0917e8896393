from __future__ import annotations

BLOCK = 20

BLACK = (0, 0, 0)
GREEN = (0, 200, 0)
BRIGHT_GREEN = (0, 255, 0)
RED = (255, 0, 0)
DARK_RED = (120, 0, 0)

GAME_OVER_MS = 1000
