"""Concrete move sources: the local console and a network peer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tictactoe.core.enums import Mark
from tictactoe.core.errors import MoveParseError
from tictactoe.core.notation import parse_move
from tictactoe.game.interfaces import GameAborted, IMoveSource, IOutputSink

if TYPE_CHECKING:
    from tictactoe.core.move import Move
    from tictactoe.net.connection import PeerConnection

_LOGGER = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input. Please enter two numbers (row and column)."


def _read_stdin() -> str:
    return input()


class ConsoleMoveSource(IMoveSource):
    """Moves typed by a local operator.

    Re-prompts until the text decodes into two numbers.  End of input
    aborts the game.

    Args:
        mark: Mark this operator places.
        sink: Where prompts and input errors are shown.
        read_line: ``() -> str``; defaults to :func:`input`.
    """

    __slots__ = ("_mark", "_sink", "_read_line")

    def __init__(
        self,
        mark: Mark,
        sink: IOutputSink,
        read_line: Callable[[], str] | None = None,
    ) -> None:
        self._mark = mark
        self._sink = sink
        self._read_line = read_line or _read_stdin

    @property
    def mark(self) -> Mark:
        return self._mark

    @property
    def is_local(self) -> bool:
        return True

    def next_move(self) -> Move:
        while True:
            self._sink.prompt(f"Player {self._mark}, enter your move (row col): ")
            try:
                line = self._read_line()
            except (EOFError, KeyboardInterrupt) as exc:
                raise GameAborted(f"Input closed for player {self._mark}") from exc

            try:
                return parse_move(line)
            except MoveParseError:
                self._sink.show_error(INVALID_INPUT_MESSAGE)


class RemoteMoveSource(IMoveSource):
    """Moves relayed by the peer over a :class:`PeerConnection`.

    A line that does not decode is dropped and the source keeps waiting;
    the turn does not advance.
    """

    __slots__ = ("_mark", "_connection", "_receive_timeout")

    def __init__(
        self,
        mark: Mark,
        connection: PeerConnection,
        receive_timeout: float | None = None,
    ) -> None:
        self._mark = mark
        self._connection = connection
        self._receive_timeout = receive_timeout

    @property
    def mark(self) -> Mark:
        return self._mark

    @property
    def is_local(self) -> bool:
        return False

    def next_move(self) -> Move:
        while True:
            line = self._connection.receive_line(self._receive_timeout)
            try:
                move = parse_move(line)
            except MoveParseError as exc:
                _LOGGER.warning("Ignoring malformed move from peer: %s", exc)
                continue
            _LOGGER.debug("Peer played %s as %s", move, self._mark)
            return move
