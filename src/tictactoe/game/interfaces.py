"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on the console or the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from tictactoe.core.enums import Mark, Outcome

if TYPE_CHECKING:
    from tictactoe.core.move import Move


class GameAborted(Exception):
    """The game ended without a result (input closed, peer gone)."""


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()
    ABORTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IMoveSource(ABC):
    """Produces the next candidate move for one mark."""

    @property
    @abstractmethod
    def mark(self) -> Mark: ...

    @property
    @abstractmethod
    def is_local(self) -> bool:
        """True when moves are typed on this machine.

        Remote turns get a "waiting" notice instead of a prompt.
        """

    @abstractmethod
    def next_move(self) -> Move:
        """Block until a well-formed move is available.

        Bounds and occupancy are not checked here; the controller asks
        again after a rejection.
        """


class IOutputSink(ABC):
    """Destination for the board and status messages."""

    @abstractmethod
    def show_board(self, rendered: str) -> None:
        """Display a rendered board."""

    @abstractmethod
    def show_message(self, text: str) -> None:
        """Display an informational line."""

    @abstractmethod
    def show_error(self, text: str) -> None:
        """Report a recoverable problem to the acting player."""

    @abstractmethod
    def show_outcome(self, outcome: Outcome) -> None:
        """Announce the end of the game."""

    @abstractmethod
    def prompt(self, text: str) -> None:
        """Ask for input without a trailing newline."""
