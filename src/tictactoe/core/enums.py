"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum

_SYMBOLS = ("X", "O")


class Mark(IntEnum):
    """Player mark. ``FIRST`` always opens the game."""

    FIRST = 0
    SECOND = 1

    @property
    def other(self) -> Mark:
        return Mark(1 - self.value)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.symbol

    def __format__(self, format_spec: str) -> str:
        return format(self.symbol, format_spec)


class Outcome(IntEnum):
    """Terminal classification of a game."""

    IN_PROGRESS = 0
    FIRST_WINS = 1
    SECOND_WINS = 2
    DRAW = 3

    @classmethod
    def won_by(cls, mark: Mark) -> Outcome:
        return cls.FIRST_WINS if mark == Mark.FIRST else cls.SECOND_WINS

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS

    @property
    def winner(self) -> Mark | None:
        if self == Outcome.FIRST_WINS:
            return Mark.FIRST
        if self == Outcome.SECOND_WINS:
            return Mark.SECOND
        return None
