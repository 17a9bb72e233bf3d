"""Forward accepted local moves to the peer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.core.engine import GameEngine
    from tictactoe.core.enums import Mark, Outcome
    from tictactoe.core.move import Move
    from tictactoe.game.controller import GameController
    from tictactoe.net.connection import PeerConnection

_LOGGER = logging.getLogger(__name__)


class MoveRelay:
    """Keeps the peer's engine in lockstep with ours.

    The raw text of every accepted move by ``local_mark`` is sent as-is.
    Rejected moves never leave this process.  The connection is closed
    once the game is decided.
    """

    __slots__ = ("_connection", "_local_mark")

    def __init__(self, connection: PeerConnection, local_mark: Mark) -> None:
        self._connection = connection
        self._local_mark = local_mark

    def attach(self, controller: GameController) -> MoveRelay:
        controller.events.on_move.append(self._on_move)
        controller.events.on_game_over.append(self._on_game_over)
        return self

    def _on_move(self, move: Move, mark: Mark, engine: GameEngine) -> None:
        if mark != self._local_mark:
            return
        self._connection.send_line(move.text)
        _LOGGER.debug("Relayed %s as %s", move, mark)

    def _on_game_over(self, outcome: Outcome) -> None:
        self._connection.close()
