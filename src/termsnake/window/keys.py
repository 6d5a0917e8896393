from __future__ import annotations

from collections.abc import Iterable

import pygame

from ..engine import Command, Direction, Exit, Move, Nop

KEY_MAP: dict[int, Command] = {
    pygame.K_UP: Move(Direction.UP),
    pygame.K_DOWN: Move(Direction.DOWN),
    pygame.K_LEFT: Move(Direction.LEFT),
    pygame.K_RIGHT: Move(Direction.RIGHT),
    pygame.K_w: Move(Direction.UP),
    pygame.K_s: Move(Direction.DOWN),
    pygame.K_a: Move(Direction.LEFT),
    pygame.K_d: Move(Direction.RIGHT),
    pygame.K_q: Exit(),
    pygame.K_ESCAPE: Exit(),
}


def command_for_events(events: Iterable[pygame.event.Event]) -> Command:
    """Last mapped key wins; closing the window always exits."""
    command: Command = Nop()
    for event in events:
        if event.type == pygame.QUIT:
            return Exit()
        if event.type == pygame.KEYDOWN:
            command = KEY_MAP.get(event.key, command)
    return command


def poll() -> Command:
    return command_for_events(pygame.event.get())
