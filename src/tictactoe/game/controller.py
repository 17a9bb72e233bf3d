"""GameController — drives one game from the first move to the result.

Coordinates: move sources, GameEngine, terminal detection.
Emits events via simple callbacks so the console / relay / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.engine import GameEngine
from tictactoe.core.enums import Mark, Outcome
from tictactoe.core.errors import MoveError
from tictactoe.core.move import Move
from tictactoe.game.interfaces import GameAborted, GamePhase, IMoveSource

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Mark, GameEngine], None]  # move, mover, engine
RejectedCallback = Callable[[Move, MoveError], None]
GameOverCallback = Callable[[Outcome], None]
AbortedCallback = Callable[[str], None]
TurnCallback = Callable[[IMoveSource], None]  # source about to be asked


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_aborted: list[AbortedCallback] = field(default_factory=list)
    on_turn: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Alternates between two move sources until the game ends.

    Exactly one move request is outstanding at a time.  After the game
    is over every further ``submit_move`` is refused.
    """

    __slots__ = ("_engine", "_sources", "_phase", "_outcome", "events")

    def __init__(self) -> None:
        self._engine = GameEngine()
        self._sources: dict[Mark, IMoveSource] = {}
        self._phase = GamePhase.NOT_STARTED
        self._outcome = Outcome.IN_PROGRESS
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_game_over(self) -> bool:
        return self._phase in (GamePhase.GAME_OVER, GamePhase.ABORTED)

    @property
    def current_source(self) -> IMoveSource | None:
        return self._sources.get(self._engine.turn)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, first: IMoveSource, second: IMoveSource) -> None:
        if first.mark != Mark.FIRST or second.mark != Mark.SECOND:
            raise ValueError("Sources must play FIRST and SECOND respectively")
        self._sources = {Mark.FIRST: first, Mark.SECOND: second}
        self._engine = GameEngine()
        self._outcome = Outcome.IN_PROGRESS
        self._phase = GamePhase.AWAITING_MOVE

    def submit_move(self, move: Move) -> bool:
        """Apply *move* for the side to move. Returns True if accepted."""
        if self._phase != GamePhase.AWAITING_MOVE:
            return False

        try:
            mark = self._engine.apply_move(move.row, move.col)
        except MoveError as exc:
            _LOGGER.info("Rejected %s for %s: %s", move, self._engine.turn, exc)
            self._emit_rejected(move, exc)
            return False

        self._emit_move(move, mark)

        outcome = self._engine.outcome()
        if outcome.is_terminal:
            self._outcome = outcome
            self._phase = GamePhase.GAME_OVER
            self._emit_game_over(outcome)
        return True

    def play(self) -> Outcome:
        """Request moves from the current source until the game ends.

        Raises:
            GameAborted: a source or subscriber gave up (closed input,
                lost peer).  The phase is ``ABORTED`` afterwards.
        """
        if self._phase == GamePhase.NOT_STARTED:
            raise RuntimeError("new_game() must be called before play()")

        try:
            while not self.is_game_over:
                source = self._sources[self._engine.turn]
                self._emit_turn(source)
                self.submit_move(source.next_move())
        except GameAborted as exc:
            self.abort(str(exc))
            raise
        return self._outcome

    def abort(self, reason: str) -> None:
        if self.is_game_over:
            return
        _LOGGER.info("Game aborted: %s", reason)
        self._phase = GamePhase.ABORTED
        for cb in self.events.on_aborted:
            cb(reason)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_turn(self, source: IMoveSource) -> None:
        for cb in self.events.on_turn:
            cb(source)

    def _emit_move(self, move: Move, mark: Mark) -> None:
        for cb in self.events.on_move:
            cb(move, mark, self._engine)

    def _emit_rejected(self, move: Move, error: MoveError) -> None:
        for cb in self.events.on_rejected:
            cb(move, error)

    def _emit_game_over(self, outcome: Outcome) -> None:
        for cb in self.events.on_game_over:
            cb(outcome)
