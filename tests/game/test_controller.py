"""Tests for GameController — the orchestrator."""

import pytest

from tictactoe.core.enums import Mark, Outcome
from tictactoe.core.errors import CellTaken, OutOfBounds
from tictactoe.core.move import Move
from tictactoe.game.controller import GameController
from tictactoe.game.interfaces import GameAborted, GamePhase, IMoveSource


class ScriptedSource(IMoveSource):
    """Move source that replays a fixed list of cells."""

    def __init__(self, mark: Mark, *cells: tuple[int, int]) -> None:
        self._mark = mark
        self._cells = list(cells)
        self.requests = 0

    @property
    def mark(self) -> Mark:
        return self._mark

    @property
    def is_local(self) -> bool:
        return True

    def next_move(self) -> Move:
        self.requests += 1
        if not self._cells:
            raise GameAborted(f"{self._mark} ran out of moves")
        return Move(*self._cells.pop(0))


def _make_controller(
    first: list[tuple[int, int]], second: list[tuple[int, int]]
) -> GameController:
    ctrl = GameController()
    ctrl.new_game(ScriptedSource(Mark.FIRST, *first), ScriptedSource(Mark.SECOND, *second))
    return ctrl


class TestNewGame:
    def test_phase_before_and_after(self) -> None:
        ctrl = GameController()
        assert ctrl.phase == GamePhase.NOT_STARTED
        ctrl.new_game(ScriptedSource(Mark.FIRST), ScriptedSource(Mark.SECOND))
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.engine.is_empty()

    def test_current_source_is_first(self) -> None:
        ctrl = _make_controller([], [])
        cp = ctrl.current_source
        assert cp is not None and cp.mark == Mark.FIRST

    def test_sources_must_match_marks(self) -> None:
        ctrl = GameController()
        with pytest.raises(ValueError):
            ctrl.new_game(ScriptedSource(Mark.SECOND), ScriptedSource(Mark.FIRST))

    def test_play_requires_new_game(self) -> None:
        with pytest.raises(RuntimeError):
            GameController().play()


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller([], [])
        assert ctrl.submit_move(Move(1, 1))
        assert ctrl.engine.turn == Mark.SECOND

    def test_rejected_move_fires_event(self) -> None:
        ctrl = _make_controller([], [])
        errors: list[type] = []
        ctrl.events.on_rejected.append(lambda move, err: errors.append(type(err)))
        assert not ctrl.submit_move(Move(3, 0))
        ctrl.submit_move(Move(0, 0))
        assert not ctrl.submit_move(Move(0, 0))
        assert errors == [OutOfBounds, CellTaken]
        assert ctrl.engine.turn == Mark.SECOND

    def test_move_event_reports_mover(self) -> None:
        ctrl = _make_controller([], [])
        seen: list[tuple[str, Mark]] = []
        ctrl.events.on_move.append(lambda move, mark, engine: seen.append((move.text, mark)))
        ctrl.submit_move(Move(0, 0, "0 0"))
        ctrl.submit_move(Move(1, 1, " 1 1"))
        assert seen == [("0 0", Mark.FIRST), (" 1 1", Mark.SECOND)]

    def test_no_moves_after_game_over(self) -> None:
        ctrl = _make_controller([], [])
        for cell in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
            ctrl.submit_move(Move(*cell))
        assert ctrl.phase == GamePhase.GAME_OVER
        before = ctrl.engine.snapshot()
        assert not ctrl.submit_move(Move(2, 0))
        assert ctrl.engine.snapshot() == before


class TestPlay:
    def test_row_win(self) -> None:
        ctrl = _make_controller([(0, 0), (0, 1), (0, 2)], [(1, 1), (2, 2)])
        results: list[Outcome] = []
        ctrl.events.on_game_over.append(results.append)
        assert ctrl.play() == Outcome.FIRST_WINS
        assert results == [Outcome.FIRST_WINS]
        assert ctrl.outcome == Outcome.FIRST_WINS
        assert ctrl.is_game_over

    def test_draw(self) -> None:
        ctrl = _make_controller(
            [(0, 1), (1, 1), (1, 2), (2, 0), (2, 2)],
            [(0, 0), (0, 2), (1, 0), (2, 1)],
        )
        assert ctrl.play() == Outcome.DRAW
        assert ctrl.engine.is_full()

    def test_rejected_move_asks_same_source_again(self) -> None:
        first = ScriptedSource(Mark.FIRST, (0, 0), (0, 1), (0, 2))
        second = ScriptedSource(Mark.SECOND, (0, 0), (5, 5), (1, 1), (2, 2))
        ctrl = GameController()
        ctrl.new_game(first, second)
        assert ctrl.play() == Outcome.FIRST_WINS
        assert second.requests == 4
        assert first.requests == 3

    def test_turn_event_before_each_request(self) -> None:
        ctrl = _make_controller([(0, 0), (0, 1), (0, 2)], [(1, 1), (2, 2)])
        turns: list[Mark] = []
        ctrl.events.on_turn.append(lambda source: turns.append(source.mark))
        ctrl.play()
        assert turns == [Mark.FIRST, Mark.SECOND, Mark.FIRST, Mark.SECOND, Mark.FIRST]

    def test_abort_propagates(self) -> None:
        ctrl = _make_controller([(0, 0)], [])
        reasons: list[str] = []
        ctrl.events.on_aborted.append(reasons.append)
        with pytest.raises(GameAborted):
            ctrl.play()
        assert ctrl.phase == GamePhase.ABORTED
        assert reasons == ["O ran out of moves"]
        assert not ctrl.submit_move(Move(1, 1))

    def test_abort_after_game_over_is_ignored(self) -> None:
        ctrl = _make_controller([(0, 0), (0, 1), (0, 2)], [(1, 1), (2, 2)])
        ctrl.play()
        ctrl.abort("late")
        assert ctrl.phase == GamePhase.GAME_OVER
