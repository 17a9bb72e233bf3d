"""Runtime configuration assembled from the command line."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from enum import StrEnum

from tictactoe.net.connection import DEFAULT_PORT

DEFAULT_BIND = "0.0.0.0"
DEFAULT_CONNECT_TIMEOUT = 10.0


class ConfigError(ValueError):
    """Invalid combination of command-line options."""


class GameMode(StrEnum):
    LOCAL = "local"
    HOST = "host"
    CLIENT = "client"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Everything needed to start one game.

    ``accept_timeout=None`` makes the host wait for an opponent forever;
    ``move_timeout=None`` waits forever for each of the peer's moves.
    """

    mode: GameMode = GameMode.LOCAL
    bind: str = DEFAULT_BIND
    host: str | None = None
    port: int = DEFAULT_PORT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    accept_timeout: float | None = None
    move_timeout: float | None = None
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if not (0 <= self.port <= 65535):
            raise ConfigError(f"Port out of range: {self.port}")
        if self.mode == GameMode.CLIENT and not self.host:
            raise ConfigError("client mode requires --host")
        if self.connect_timeout <= 0:
            raise ConfigError("--connect-timeout must be positive")
        if self.accept_timeout is not None and self.accept_timeout <= 0:
            raise ConfigError("--accept-timeout must be positive")
        if self.move_timeout is not None and self.move_timeout <= 0:
            raise ConfigError("--move-timeout must be positive")

    @property
    def is_networked(self) -> bool:
        return self.mode != GameMode.LOCAL

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> GameConfig:
        mode = GameMode(args.mode)
        level = logging.DEBUG if args.verbose else _parse_level(args.log_level)
        return cls(
            mode=mode,
            bind=getattr(args, "bind", DEFAULT_BIND),
            host=getattr(args, "host", None),
            port=getattr(args, "port", DEFAULT_PORT),
            connect_timeout=getattr(args, "connect_timeout", DEFAULT_CONNECT_TIMEOUT),
            accept_timeout=getattr(args, "accept_timeout", None),
            move_timeout=getattr(args, "move_timeout", None),
            log_level=level,
        )


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {name!r}")
    return level
