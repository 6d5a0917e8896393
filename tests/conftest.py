import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from termsnake.engine import Direction, Food, Game, Snake
from termsnake.linalg import Board, Pos


def build_game(board, cells, direction, food, periodic=False, seed=0):
    """Game whose snake is exactly ``cells`` (head first) with food at ``food``."""
    game = Game(board, 1, periodic, rng=random.Random(seed))
    snake = Snake.with_capacity(2 * board.x * board.y, cells[-1])
    for p in reversed(cells[:-1]):
        snake.grow(p)
    snake.direction = direction
    game.snake = snake
    game.food = Food(food)
    return game


@pytest.fixture
def make_game():
    return build_game


@pytest.fixture
def board16():
    return Board(16, 16)


@pytest.fixture
def straight_game(board16):
    """Length 3 snake heading right in the middle of a bounded 16x16 board."""
    return build_game(
        board16,
        [Pos(5, 8), Pos(4, 8), Pos(3, 8)],
        Direction.RIGHT,
        food=Pos(0, 0),
    )


@pytest.fixture
def one_cell_left():
    """5x5 bounded board covered by a snake except (4, 4), where the food sits."""
    path = []
    for y in range(5):
        row = [Pos(x, y) for x in range(5)]
        path.extend(row if y % 2 == 0 else row[::-1])
    return build_game(Board(5, 5), path[-2::-1], Direction.RIGHT, food=path[-1])
