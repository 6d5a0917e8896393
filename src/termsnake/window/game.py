from __future__ import annotations

import pygame

from ..engine import Ended, Game
from ..loop import run
from . import config
from .keys import poll
from .render import WindowDrawer


def play(game: Game, tick_seconds: float) -> Ended:
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.board.x * config.BLOCK, game.board.y * config.BLOCK))
        pygame.display.set_caption("termsnake")
        clock = pygame.time.Clock()

        result = run(
            game,
            WindowDrawer(screen),
            poll,
            tick_seconds,
            sleep=lambda s: clock.tick(1.0 / s) if s > 0 else None,
        )
        pygame.time.wait(config.GAME_OVER_MS)
        return result
    finally:
        pygame.quit()
