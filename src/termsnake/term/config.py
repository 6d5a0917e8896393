from __future__ import annotations

from ..linalg import Pos

SYMBOL_EMPTY = " "
SYMBOL_BORDER = "█"
SYMBOL_SNAKE_BODY = "o"
SYMBOL_SNAKE_HEAD = "@"
SYMBOL_FOOD = "¤"

STYLE_BORDER = "bright_black"
STYLE_SNAKE_BODY = "green"
STYLE_SNAKE_HEAD = "bold bright_green"
STYLE_FOOD = "red"
STYLE_GAME_OVER = "bold red"

# Screen cell of board (0, 0); the border sits one cell outside it.
BOARD_OFFSET = Pos(3, 3)

# Columns/rows kept free around the board.
RESERVE = Pos(10, 10)
