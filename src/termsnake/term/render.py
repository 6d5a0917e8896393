from __future__ import annotations

from rich.console import Console
from rich.control import Control

from ..engine import ConfigError, EndReason, Game, GameUpdate
from ..linalg import Board, Pos
from . import config

GAME_OVER_MESSAGES = {
    EndReason.EXIT: "bye",
    EndReason.WALL: "game over: hit the wall",
    EndReason.SELF: "game over: bit its own tail",
    EndReason.BOARD_FULL: "board full, you win",
}


class TerminalTooSmallError(ConfigError):
    pass


def max_board_size(console: Console) -> Board:
    width, height = console.size
    return Board(width, height) - config.RESERVE


class TerminalDrawer:
    """Paints a game on a cursor-addressable terminal.

    Board cells map to screen cells shifted by ``config.BOARD_OFFSET``. After
    the first full paint only the cells named in a GameUpdate are redrawn.
    """

    def __init__(self, game: Game, console: Console | None = None):
        self.console = console if console is not None else Console(highlight=False)
        self.board_offset = config.BOARD_OFFSET

        limit = max_board_size(self.console)
        if game.board.x > limit.x or game.board.y > limit.y:
            raise TerminalTooSmallError(
                f"board {game.board.x}x{game.board.y} does not fit the terminal "
                f"(max {limit.x}x{limit.y})"
            )

    def draw_initial(self, game: Game) -> None:
        self.console.control(Control.clear(), Control.home(), Control.show_cursor(False))
        self._draw_border(game)
        self._draw_snake(game)
        self._print_on_board(game.food.pos, config.SYMBOL_FOOD, config.STYLE_FOOD)
        self._flush()

    def draw_update(self, game: Game, update: GameUpdate) -> None:
        # Erase first: the new head may sit on the old tail cell.
        if update.tail_prev_pos is not None:
            self._print_on_board(update.tail_prev_pos, config.SYMBOL_EMPTY)
        if update.head_prev_pos is not None:
            self._print_on_board(update.head_prev_pos, config.SYMBOL_SNAKE_BODY, config.STYLE_SNAKE_BODY)
        self._print_on_board(game.snake.head(), config.SYMBOL_SNAKE_HEAD, config.STYLE_SNAKE_HEAD)
        if update.food_renew:
            self._print_on_board(game.food.pos, config.SYMBOL_FOOD, config.STYLE_FOOD)
        self._flush()

    def draw_game_over(self, game: Game, reason: EndReason) -> None:
        if reason is EndReason.BOARD_FULL:
            # The winning move is never sent as an update.
            head, neck = list(game.snake)[:2]
            self._print_on_board(neck, config.SYMBOL_SNAKE_BODY, config.STYLE_SNAKE_BODY)
            self._print_on_board(head, config.SYMBOL_SNAKE_HEAD, config.STYLE_SNAKE_HEAD)
        below = self.board_offset + Pos(0, game.board.y + 1)
        self._print_at(below, GAME_OVER_MESSAGES[reason], config.STYLE_GAME_OVER)
        self._flush()

    def close(self, game: Game) -> None:
        self.console.control(Control.move_to(0, self.board_offset.y + game.board.y + 2))
        self.console.control(Control.show_cursor(True))
        self.console.out("", end="\n")
        self._flush()

    # --- private ---
    def _print_at(self, pos: Pos, text: str, style: str | None = None) -> None:
        self.console.control(Control.move_to(pos.x, pos.y))
        self.console.out(text, style=style, highlight=False, end="")

    def _print_on_board(self, pos: Pos, text: str, style: str | None = None) -> None:
        self._print_at(self.board_offset + pos, text, style)

    def _draw_border(self, game: Game) -> None:
        base = self.board_offset - Pos(1, 1)
        size = game.board + Pos(2, 2)
        row = config.SYMBOL_BORDER * size.x

        self._print_at(base, row, config.STYLE_BORDER)
        for y in range(1, size.y - 1):
            self._print_at(base + Pos(0, y), config.SYMBOL_BORDER, config.STYLE_BORDER)
            self._print_at(base + Pos(size.x - 1, y), config.SYMBOL_BORDER, config.STYLE_BORDER)
        self._print_at(base + Pos(0, size.y - 1), row, config.STYLE_BORDER)

    def _draw_snake(self, game: Game) -> None:
        cells = iter(game.snake)
        self._print_on_board(next(cells), config.SYMBOL_SNAKE_HEAD, config.STYLE_SNAKE_HEAD)
        for p in cells:
            self._print_on_board(p, config.SYMBOL_SNAKE_BODY, config.STYLE_SNAKE_BODY)

    def _flush(self) -> None:
        self.console.file.flush()
