"""GameEngine - board state, turn alternation and terminal detection.

The engine is pure state: it performs no I/O and knows nothing about
where moves come from.  Callers drive it::

    engine = GameEngine()
    engine.apply_move(1, 1)
    if engine.outcome().is_terminal:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass

from tictactoe.core.board import Board, in_bounds
from tictactoe.core.enums import Mark, Outcome
from tictactoe.core.errors import CellTaken, OutOfBounds


@dataclass(frozen=True, slots=True)
class EngineSnapshot:
    """Immutable copy of ``(board, turn)`` for comparisons."""

    cells: tuple[tuple[Mark | None, ...], ...]
    turn: Mark


class GameEngine:
    """Owns one game's board and turn.

    ``turn`` is the mark placed by the next successful move.  It toggles
    after every accepted move and never after a rejected one.  The engine
    keeps accepting moves after a win; refusing them is the caller's job.
    """

    __slots__ = ("_board", "_turn")

    def __init__(self) -> None:
        self._board = Board()
        self._turn = Mark.FIRST

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def turn(self) -> Mark:
        return self._turn

    @property
    def board(self) -> Board:
        """A copy of the board; mutating it does not affect the engine."""
        return self._board.copy()

    def cell(self, row: int, col: int) -> Mark | None:
        return self._board[row, col]

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, row: int, col: int) -> Mark:
        """Place the current mark at ``(row, col)`` and pass the turn.

        Bounds are checked before occupancy.

        Raises:
            OutOfBounds: ``row`` or ``col`` outside ``[0, 2]``.
            CellTaken: the cell already holds a mark.
        """
        if not in_bounds(row, col):
            raise OutOfBounds(row, col)
        if self._board.is_occupied(row, col):
            raise CellTaken(row, col)

        placed = self._turn
        self._board[row, col] = placed
        self._turn = placed.other
        return placed

    # ── Queries ──────────────────────────────────────────────────────────

    def winner(self) -> Mark | None:
        return self._board.line_owner()

    def is_full(self) -> bool:
        return self._board.is_full()

    def is_empty(self) -> bool:
        return self._board.is_empty()

    def outcome(self) -> Outcome:
        """Classify the position. A full board with a line is a win."""
        winner = self.winner()
        if winner is not None:
            return Outcome.won_by(winner)
        if self.is_full():
            return Outcome.DRAW
        return Outcome.IN_PROGRESS

    def render(self) -> str:
        return str(self._board)

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(cells=self._board.as_tuple(), turn=self._turn)

    def __repr__(self) -> str:
        return f"GameEngine(turn={self._turn.symbol}, marks={self._board.mark_count()})"
