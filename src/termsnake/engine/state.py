from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from ..linalg import Pos


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> Pos:
        return _VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# y grows downward, matching screen rows.
_VECTORS = {
    Direction.UP: Pos(0, -1),
    Direction.DOWN: Pos(0, 1),
    Direction.LEFT: Pos(-1, 0),
    Direction.RIGHT: Pos(1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# --- Commands ---
@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Nop:
    """Keep going in the current heading."""


@dataclass(frozen=True)
class Exit:
    pass


Command = Union[Move, Nop, Exit]


@dataclass
class Food:
    pos: Pos


@dataclass(frozen=True)
class GameUpdate:
    """Cells touched by one tick.

    head_prev_pos: where the head was; now a body segment.
    tail_prev_pos: the vacated tail cell, None when the snake grew.
    food_renew: the food moved to a new cell.
    """

    head_prev_pos: Pos | None
    tail_prev_pos: Pos | None
    food_renew: bool


class EndReason(enum.Enum):
    EXIT = "exit"
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


# --- Step results ---
@dataclass(frozen=True)
class Continue:
    update: GameUpdate


@dataclass(frozen=True)
class Ended:
    reason: EndReason


StepResult = Union[Continue, Ended]
