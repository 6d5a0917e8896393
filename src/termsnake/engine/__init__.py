from .errors import BoardFullError, ConfigError, InvalidBoardError, InvalidLengthError
from .logic import Game
from .snake import Snake
from .state import (
    Command,
    Continue,
    Direction,
    EndReason,
    Ended,
    Exit,
    Food,
    GameUpdate,
    Move,
    Nop,
    StepResult,
)

__all__ = [
    "Game",
    "Snake",
    "Direction",
    "Command",
    "Move",
    "Nop",
    "Exit",
    "Food",
    "GameUpdate",
    "Continue",
    "Ended",
    "EndReason",
    "StepResult",
    "ConfigError",
    "InvalidBoardError",
    "InvalidLengthError",
    "BoardFullError",
]
