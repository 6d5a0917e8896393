from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

from .engine import Command, Ended, EndReason, Game, GameUpdate

logger = logging.getLogger(__name__)


class Drawer(Protocol):
    def draw_initial(self, game: Game) -> None: ...

    def draw_update(self, game: Game, update: GameUpdate) -> None: ...

    def draw_game_over(self, game: Game, reason: EndReason) -> None: ...


def run(
    game: Game,
    drawer: Drawer,
    poll: Callable[[], Command],
    tick_seconds: float,
    sleep: Callable[[float], None] = time.sleep,
) -> Ended:
    """Drive ``game`` until it ends; returns the terminal result."""
    drawer.draw_initial(game)
    logger.info("loop started, tick %.3fs", tick_seconds)

    ticks = 0
    while True:
        result = game.exec(poll())
        if isinstance(result, Ended):
            break
        drawer.draw_update(game, result.update)
        ticks += 1
        sleep(tick_seconds)

    drawer.draw_game_over(game, result.reason)
    logger.info("loop stopped after %d ticks (%s)", ticks, result.reason.value)
    return result
