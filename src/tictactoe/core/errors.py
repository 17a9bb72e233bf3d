"""Recoverable move errors raised by :class:`~tictactoe.core.engine.GameEngine`."""

from __future__ import annotations


class MoveError(Exception):
    """Base class for a rejected move. State is never mutated."""

    def __init__(self, row: int, col: int, message: str) -> None:
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfBounds(MoveError):
    """Row or column lies outside the 3x3 board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, "Out of bounds.")


class CellTaken(MoveError):
    """Target cell already holds a mark."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, "Cell already taken.")


class MoveParseError(ValueError):
    """Raw move text could not be decoded into a ``(row, col)`` pair."""
