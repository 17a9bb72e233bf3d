"""Tests for the console sink and its controller wiring."""

import pytest

from tictactoe.core.enums import Mark, Outcome
from tictactoe.core.move import Move
from tictactoe.game.console import ConsoleSink, attach_console, outcome_message
from tictactoe.game.controller import GameController
from tictactoe.game.interfaces import GameAborted
from tictactoe.game.sources import ConsoleMoveSource, RemoteMoveSource
from tictactoe.net.connection import ConnectionClosed


class ReplayConnection:
    def __init__(self, *lines: str) -> None:
        self._lines = list(lines)

    def receive_line(self, timeout: float | None = None) -> str:
        if not self._lines:
            raise ConnectionClosed("Peer disconnected")
        return self._lines.pop(0)


class TestConsoleSink:
    def test_board_has_header(self) -> None:
        out: list[str] = []
        ConsoleSink(out.append).show_board(" .  .  . ")
        assert out == ["Current board:\n .  .  . \n"]

    def test_prompt_has_no_newline(self) -> None:
        out: list[str] = []
        ConsoleSink(out.append).prompt("Move: ")
        assert out == ["Move: "]

    def test_outcome_messages(self) -> None:
        assert outcome_message(Outcome.FIRST_WINS) == "Player X wins!"
        assert outcome_message(Outcome.SECOND_WINS) == "Player O wins!"
        assert outcome_message(Outcome.DRAW) == "It's a draw!"


class TestAttachConsole:
    def _controller(self, sink, scripted_input) -> GameController:
        ctrl = GameController()
        attach_console(ctrl, sink)
        ctrl.new_game(
            ConsoleMoveSource(Mark.FIRST, sink, scripted_input()),
            ConsoleMoveSource(Mark.SECOND, sink, scripted_input()),
        )
        return ctrl

    def test_board_rendered_after_accepted_move(self, sink, scripted_input) -> None:
        ctrl = self._controller(sink, scripted_input)
        ctrl.submit_move(Move(0, 0))
        assert sink.boards == [ctrl.engine.render()]

    def test_rejections_reported(self, sink, scripted_input) -> None:
        ctrl = self._controller(sink, scripted_input)
        ctrl.submit_move(Move(0, 3))
        ctrl.submit_move(Move(0, 0))
        ctrl.submit_move(Move(0, 0))
        assert sink.errors == [
            "Invalid move: Out of bounds.",
            "Invalid move: Cell already taken.",
        ]
        assert len(sink.boards) == 1

    def test_waiting_notice_only_for_remote_turns(self, sink, scripted_input) -> None:
        ctrl = GameController()
        attach_console(ctrl, sink)
        ctrl.new_game(
            ConsoleMoveSource(Mark.FIRST, sink, scripted_input("0 0")),
            RemoteMoveSource(Mark.SECOND, ReplayConnection("1 1")),
        )
        with pytest.raises(GameAborted):
            ctrl.play()
        assert sink.messages == ["Waiting for Player O to move..."]
        assert len(sink.prompts) == 2

    def test_outcome_reported(self, sink, scripted_input) -> None:
        ctrl = self._controller(sink, scripted_input)
        for cell in [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2)]:
            ctrl.submit_move(Move(*cell))
        assert sink.outcomes == [Outcome.FIRST_WINS]


class TestLocalGame:
    def test_full_game_from_one_input_stream(self, sink, scripted_input) -> None:
        # Both players share one keyboard; one input stream feeds both sources.
        read = scripted_input("0 0", "1 1", "bad", "0 0", "0 1", "2 2", "0 2")
        ctrl = GameController()
        attach_console(ctrl, sink)
        ctrl.new_game(
            ConsoleMoveSource(Mark.FIRST, sink, read),
            ConsoleMoveSource(Mark.SECOND, sink, read),
        )
        assert ctrl.play() == Outcome.FIRST_WINS
        assert "Invalid move: Cell already taken." in sink.errors
        assert len(sink.boards) == 5
