"""Command-line entry point.

Usage::

    # Two players at one keyboard
    tictactoe local

    # Play X and wait for an opponent
    tictactoe host --port 4567

    # Play O against a host
    tictactoe client --host 192.168.1.20 --port 4567
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from tictactoe.config import (
    DEFAULT_BIND,
    DEFAULT_CONNECT_TIMEOUT,
    ConfigError,
    GameConfig,
    GameMode,
)
from tictactoe.core.enums import Mark
from tictactoe.game.console import ConsoleSink, attach_console
from tictactoe.game.controller import GameController
from tictactoe.game.interfaces import GameAborted, IOutputSink
from tictactoe.game.sources import ConsoleMoveSource, RemoteMoveSource
from tictactoe.net.connection import (
    DEFAULT_PORT,
    PeerConnection,
    PeerError,
    PeerListener,
    ensure_core_application,
    local_addresses,
)
from tictactoe.net.relay import MoveRelay

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Tic-tac-toe on one keyboard or between two machines.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG"
    )
    sub = parser.add_subparsers(dest="mode", required=True)

    sub.add_parser("local", help="Both players share this terminal")

    host = sub.add_parser("host", help="Play X and wait for an opponent")
    host.add_argument("--bind", default=DEFAULT_BIND, help="Address to listen on")
    host.add_argument("--port", type=int, default=DEFAULT_PORT)
    host.add_argument(
        "--accept-timeout",
        type=float,
        default=None,
        help="Seconds to wait for an opponent (default: forever)",
    )

    client = sub.add_parser("client", help="Play O against a host")
    client.add_argument("--host", required=True, help="Host address")
    client.add_argument("--port", type=int, default=DEFAULT_PORT)
    client.add_argument(
        "--connect-timeout", type=float, default=DEFAULT_CONNECT_TIMEOUT
    )

    for networked in (host, client):
        networked.add_argument(
            "--move-timeout",
            type=float,
            default=None,
            help="Seconds to wait for each opponent move (default: forever)",
        )

    return parser


def _invite_text(port: int) -> str:
    addrs = local_addresses() or ["127.0.0.1"]
    lines = ["Waiting for an opponent. They can join with one of:"]
    lines.extend(f"\ttictactoe client --host {addr} --port {port}" for addr in addrs)
    return "\n".join(lines)


def run_local(sink: IOutputSink) -> int:
    controller = GameController()
    attach_console(controller, sink)
    controller.new_game(
        ConsoleMoveSource(Mark.FIRST, sink),
        ConsoleMoveSource(Mark.SECOND, sink),
    )
    sink.show_board(controller.engine.render())
    controller.play()
    return 0


def run_networked(
    connection: PeerConnection,
    local_mark: Mark,
    sink: IOutputSink,
    *,
    read_line: Callable[[], str] | None = None,
    move_timeout: float | None = None,
) -> int:
    """Play *local_mark* here; the other mark arrives over *connection*."""
    local = ConsoleMoveSource(local_mark, sink, read_line)
    remote = RemoteMoveSource(local_mark.other, connection, move_timeout)
    first, second = (local, remote) if local_mark == Mark.FIRST else (remote, local)

    controller = GameController()
    attach_console(controller, sink)
    MoveRelay(connection, local_mark).attach(controller)
    controller.new_game(first, second)
    sink.show_message(f"You are playing {local_mark}.")
    sink.show_board(controller.engine.render())
    try:
        controller.play()
    finally:
        connection.close()
    return 0


def run(config: GameConfig, sink: IOutputSink | None = None) -> int:
    sink = sink or ConsoleSink()
    try:
        if not config.is_networked:
            return run_local(sink)

        ensure_core_application()
        if config.mode == GameMode.HOST:
            with PeerListener(config.bind, config.port) as listener:
                sink.show_message(_invite_text(listener.port))
                connection = listener.accept(config.accept_timeout)
            return run_networked(
                connection, Mark.FIRST, sink, move_timeout=config.move_timeout
            )

        assert config.host is not None
        connection = PeerConnection.connect(
            config.host, config.port, config.connect_timeout
        )
        return run_networked(
            connection, Mark.SECOND, sink, move_timeout=config.move_timeout
        )
    except PeerError as exc:
        _LOGGER.debug("Peer failure", exc_info=True)
        sink.show_error(f"Connection problem: {exc}")
        return 1
    except GameAborted as exc:
        sink.show_message(f"Game aborted: {exc}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and play one game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig.from_args(args)
    except ConfigError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
