"""Core domain layer — pure tic-tac-toe logic with zero external dependencies.

Quick start::

    from tictactoe.core import GameEngine, parse_move

    engine = GameEngine()
    move = parse_move("1 1")
    engine.apply_move(move.row, move.col)
    print(engine.render())
"""

from tictactoe.core.board import LINES, SIZE, Board
from tictactoe.core.engine import EngineSnapshot, GameEngine
from tictactoe.core.enums import Mark, Outcome
from tictactoe.core.errors import CellTaken, MoveError, MoveParseError, OutOfBounds
from tictactoe.core.move import Move
from tictactoe.core.notation import parse_move

__all__ = [
    # Enums
    "Mark",
    "Outcome",
    # Errors
    "CellTaken",
    "MoveError",
    "MoveParseError",
    "OutOfBounds",
    # Domain objects
    "LINES",
    "SIZE",
    "Board",
    "EngineSnapshot",
    "GameEngine",
    "Move",
    # Notation
    "parse_move",
]
