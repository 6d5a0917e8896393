from __future__ import annotations

import logging
import random

from .. import config
from ..linalg import Board, Pos
from .errors import BoardFullError, InvalidBoardError, InvalidLengthError
from .snake import Snake
from .state import (
    Command,
    Continue,
    Direction,
    EndReason,
    Ended,
    Exit,
    Food,
    GameUpdate,
    Move,
    Nop,
    StepResult,
)

logger = logging.getLogger(__name__)


class Game:
    """Board, snake and food, advanced one tick per exec() call.

    The game does no I/O and no timing. Randomness comes from ``rng`` so a
    seeded ``random.Random`` gives a reproducible game.
    """

    def __init__(
        self,
        board: Board,
        initial_length: int,
        periodic_world: bool,
        rng: random.Random | None = None,
    ):
        if board.x <= config.MIN_BOARD_SIDE or board.y <= config.MIN_BOARD_SIDE:
            raise InvalidBoardError(
                f"board must be larger than {config.MIN_BOARD_SIDE}x{config.MIN_BOARD_SIDE}, "
                f"got {board.x}x{board.y}"
            )
        if initial_length < 1:
            raise InvalidLengthError(f"initial length must be at least 1, got {initial_length}")

        self.board = board
        self.periodic_world = periodic_world
        self.rng = rng if rng is not None else random.Random()

        length = min(initial_length, board.x - 2)
        tail = Pos(
            self.rng.randrange(0, (board.x - length) // 2),
            self.rng.randrange(0, board.y),
        )
        self.snake = Snake.with_capacity(config.CAPACITY_FACTOR * board.x * board.y, tail)
        grow_vec = self.snake.direction.vector
        for i in range(1, length):
            self.snake.grow(tail + i * grow_vec)

        self.food = Food(Pos(0, 0))  # placeholder until generate_food runs
        self.generate_food()

        logger.info(
            "new game: board %dx%d, length %d, %s world, head at %r",
            board.x,
            board.y,
            length,
            "periodic" if periodic_world else "bounded",
            self.snake.head(),
        )

    @property
    def area(self) -> int:
        return self.board.x * self.board.y

    def generate_food(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else self.rng
        if len(self.snake) >= self.area:
            raise BoardFullError(f"snake covers all {self.area} cells")

        while True:
            pos = Pos(rng.randrange(0, self.board.x), rng.randrange(0, self.board.y))
            if not self.snake.contains(pos):
                self.food = Food(pos)
                logger.debug("food placed at %r", pos)
                return

    def exec(self, command: Command) -> StepResult:
        if isinstance(command, Move):
            return self._step(command.direction)
        if isinstance(command, Nop):
            return self._step(self.snake.direction)
        if isinstance(command, Exit):
            return self._end(EndReason.EXIT)
        raise TypeError(f"unknown command: {command!r}")

    def normalize_dir(self, direction: Direction) -> Direction:
        # A snake cannot reverse into itself; keep going instead.
        if direction is self.snake.direction.opposite:
            return self.snake.direction
        return direction

    def _wrap(self, pos: Pos) -> Pos | None:
        x, y = pos.x, pos.y
        if not (0 <= x < self.board.x):
            if not self.periodic_world:
                return None
            x %= self.board.x
        if not (0 <= y < self.board.y):
            if not self.periodic_world:
                return None
            y %= self.board.y
        return Pos(x, y)

    def _step(self, direction: Direction) -> StepResult:
        direction = self.normalize_dir(direction)
        self.snake.direction = direction

        head_cur_pos = self.snake.head()
        head_new_pos = self._wrap(head_cur_pos + direction.vector)
        if head_new_pos is None:
            return self._end(EndReason.WALL)

        if head_new_pos == self.food.pos:
            self.snake.grow(head_new_pos)
            if len(self.snake) >= self.area:
                return self._end(EndReason.BOARD_FULL)
            self.generate_food()
            return Continue(GameUpdate(head_prev_pos=head_cur_pos, tail_prev_pos=None, food_renew=True))

        if not self.snake.can_step(head_new_pos):
            return self._end(EndReason.SELF)

        tail_cur_pos = self.snake.tail()
        self.snake.step(head_new_pos)
        return Continue(GameUpdate(head_prev_pos=head_cur_pos, tail_prev_pos=tail_cur_pos, food_renew=False))

    def _end(self, reason: EndReason) -> Ended:
        logger.info("game ended (%s) with length %d", reason.value, len(self.snake))
        return Ended(reason)
