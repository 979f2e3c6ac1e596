"""Action kinds and the error raised when a game rule is broken."""

from __future__ import annotations

import enum


class ActionType(enum.Enum):
    """The kinds of action a player can take during a turn."""

    NONE = enum.auto()
    GATHER = enum.auto()
    TAX = enum.auto()
    BRIBE = enum.auto()
    ARREST = enum.auto()
    SANCTION = enum.auto()
    COUP = enum.auto()


class CoupError(ValueError):
    """Raised when a move breaks the rules of the game."""