from .game import play
from .keys import RawTerminal, parse_keys
from .render import TerminalDrawer, TerminalTooSmallError

__all__ = ["play", "RawTerminal", "parse_keys", "TerminalDrawer", "TerminalTooSmallError"]
