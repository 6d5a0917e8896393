from __future__ import annotations


class ConfigError(ValueError):
    """A game cannot be started with these settings."""


class InvalidBoardError(ConfigError):
    pass


class InvalidLengthError(ConfigError):
    pass


class BoardFullError(RuntimeError):
    """No free cell is left for food."""
