"""Game management layer — controller, move sources, console output.

Quick start::

    from tictactoe.core import Mark
    from tictactoe.game import (
        ConsoleMoveSource,
        ConsoleSink,
        GameController,
        attach_console,
    )

    sink = ConsoleSink()
    ctrl = GameController()
    attach_console(ctrl, sink)
    ctrl.new_game(
        ConsoleMoveSource(Mark.FIRST, sink),
        ConsoleMoveSource(Mark.SECOND, sink),
    )
    ctrl.play()
"""

from tictactoe.game.console import ConsoleSink, attach_console, outcome_message
from tictactoe.game.controller import GameController, GameEvents
from tictactoe.game.interfaces import (
    GameAborted,
    GamePhase,
    IMoveSource,
    IOutputSink,
)
from tictactoe.game.sources import ConsoleMoveSource, RemoteMoveSource

__all__ = [
    # Interfaces
    "GameAborted",
    "GamePhase",
    "IMoveSource",
    "IOutputSink",
    # Concrete
    "ConsoleMoveSource",
    "ConsoleSink",
    "GameController",
    "GameEvents",
    "RemoteMoveSource",
    "attach_console",
    "outcome_message",
]
