from .game import play
from .keys import command_for_events
from .render import WindowDrawer

__all__ = ["play", "command_for_events", "WindowDrawer"]
