"""Console output sink and its wiring to controller events."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Callable

from tictactoe.core.enums import Outcome
from tictactoe.game.interfaces import IMoveSource, IOutputSink

if TYPE_CHECKING:
    from tictactoe.core.engine import GameEngine
    from tictactoe.core.enums import Mark
    from tictactoe.core.errors import MoveError
    from tictactoe.core.move import Move
    from tictactoe.game.controller import GameController


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class ConsoleSink(IOutputSink):
    """Writes everything to a text stream (stdout by default)."""

    __slots__ = ("_write",)

    def __init__(self, write: Callable[[str], None] | None = None) -> None:
        self._write = write or _write_stdout

    def show_board(self, rendered: str) -> None:
        self._write(f"Current board:\n{rendered}\n")

    def show_message(self, text: str) -> None:
        self._write(f"{text}\n")

    def show_error(self, text: str) -> None:
        self._write(f"{text}\n")

    def show_outcome(self, outcome: Outcome) -> None:
        self._write(f"{outcome_message(outcome)}\n")

    def prompt(self, text: str) -> None:
        self._write(text)


def outcome_message(outcome: Outcome) -> str:
    winner = outcome.winner
    if winner is not None:
        return f"Player {winner} wins!"
    if outcome == Outcome.DRAW:
        return "It's a draw!"
    return "Game in progress."


def attach_console(controller: GameController, sink: IOutputSink) -> None:
    """Render the board after each accepted move and report results."""

    def on_turn(source: IMoveSource) -> None:
        if not source.is_local:
            sink.show_message(f"Waiting for Player {source.mark} to move...")

    def on_move(move: Move, mark: Mark, engine: GameEngine) -> None:
        sink.show_board(engine.render())

    def on_rejected(move: Move, error: MoveError) -> None:
        sink.show_error(f"Invalid move: {error}")

    controller.events.on_turn.append(on_turn)
    controller.events.on_move.append(on_move)
    controller.events.on_rejected.append(on_rejected)
    controller.events.on_game_over.append(sink.show_outcome)
