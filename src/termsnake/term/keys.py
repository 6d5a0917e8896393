from __future__ import annotations

import os
import select
import sys
import termios
import tty
from typing import TextIO

from ..engine import Command, Direction, Exit, Move, Nop

ESC = "\x1b"

KEY_MAP: dict[str, Command] = {
    "\x1b[A": Move(Direction.UP),
    "\x1b[B": Move(Direction.DOWN),
    "\x1b[C": Move(Direction.RIGHT),
    "\x1b[D": Move(Direction.LEFT),
    # Application cursor mode.
    "\x1bOA": Move(Direction.UP),
    "\x1bOB": Move(Direction.DOWN),
    "\x1bOC": Move(Direction.RIGHT),
    "\x1bOD": Move(Direction.LEFT),
    "w": Move(Direction.UP),
    "s": Move(Direction.DOWN),
    "a": Move(Direction.LEFT),
    "d": Move(Direction.RIGHT),
    "q": Exit(),
    ESC: Exit(),
    "\x03": Exit(),
}


def split_keys(data: str) -> list[str]:
    """Split raw terminal input into key tokens (escape sequences kept whole)."""
    keys: list[str] = []
    i = 0
    while i < len(data):
        intro = data[i + 1 : i + 2]
        if data[i] == ESC and intro == "[":
            # CSI: parameter bytes up to a final byte in "@".."~".
            j = i + 2
            while j < len(data) and not ("@" <= data[j] <= "~"):
                j += 1
            keys.append(data[i : j + 1])
            i = j + 1
        elif data[i] == ESC and intro == "O" and i + 2 < len(data):
            keys.append(data[i : i + 3])
            i += 3
        else:
            keys.append(data[i].lower())
            i += 1
    return keys


def parse_keys(data: str) -> Command:
    """Command for the last key pressed; Nop when nothing usable arrived."""
    keys = split_keys(data)
    if not keys:
        return Nop()
    return KEY_MAP.get(keys[-1], Nop())


class RawTerminal:
    """Puts the terminal in cbreak mode and polls stdin without blocking."""

    def __init__(self, stream: TextIO = sys.stdin):
        self.fd = stream.fileno()
        self._saved: list | None = None

    def __enter__(self) -> RawTerminal:
        self._saved = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        return self

    def __exit__(self, *exc) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def read_pending(self) -> str:
        chunks: list[bytes] = []
        while select.select([self.fd], [], [], 0)[0]:
            chunk = os.read(self.fd, 64)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks).decode("utf-8", errors="ignore")

    def poll(self) -> Command:
        return parse_keys(self.read_pending())
