from __future__ import annotations

from typing import Callable

import pygame

from ..engine import EndReason, Game, GameUpdate
from ..linalg import Pos
from . import config


def cell_rect(pos: Pos) -> pygame.Rect:
    return pygame.Rect(pos.x * config.BLOCK, pos.y * config.BLOCK, config.BLOCK, config.BLOCK)


class WindowDrawer:
    """Pygame drawer that pushes only the touched cell rects to the display."""

    def __init__(self, screen: pygame.Surface, flip: Callable[..., None] | None = None):
        self.screen = screen
        self._flip = flip if flip is not None else pygame.display.update

    def draw_initial(self, game: Game) -> None:
        self.screen.fill(config.BLACK)
        cells = iter(game.snake)
        pygame.draw.rect(self.screen, config.BRIGHT_GREEN, cell_rect(next(cells)))
        for p in cells:
            pygame.draw.rect(self.screen, config.GREEN, cell_rect(p))
        pygame.draw.rect(self.screen, config.RED, cell_rect(game.food.pos))
        self._flip()

    def draw_update(self, game: Game, update: GameUpdate) -> None:
        dirty: list[pygame.Rect] = []
        if update.tail_prev_pos is not None:
            dirty.append(self._paint(update.tail_prev_pos, config.BLACK))
        if update.head_prev_pos is not None:
            dirty.append(self._paint(update.head_prev_pos, config.GREEN))
        dirty.append(self._paint(game.snake.head(), config.BRIGHT_GREEN))
        if update.food_renew:
            dirty.append(self._paint(game.food.pos, config.RED))
        self._flip(dirty)

    def draw_game_over(self, game: Game, reason: EndReason) -> None:
        if reason is EndReason.EXIT:
            return
        if reason is EndReason.BOARD_FULL:
            # The winning move is never sent as an update.
            head, neck = list(game.snake)[:2]
            self._flip([self._paint(neck, config.GREEN), self._paint(head, config.BRIGHT_GREEN)])
            return
        self._flip([self._paint(game.snake.head(), config.DARK_RED)])

    def _paint(self, pos: Pos, color: tuple[int, int, int]) -> pygame.Rect:
        rect = cell_rect(pos)
        pygame.draw.rect(self.screen, color, rect)
        return rect
