from __future__ import annotations

from rich.console import Console

from ..engine import Ended, Game
from ..loop import run
from .keys import RawTerminal
from .render import TerminalDrawer


def play(game: Game, tick_seconds: float, console: Console | None = None) -> Ended:
    drawer = TerminalDrawer(game, console)
    with RawTerminal() as term:
        try:
            return run(game, drawer, term.poll, tick_seconds)
        finally:
            drawer.close(game)
