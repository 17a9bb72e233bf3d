"""Peer-to-peer transport: a framed TCP stream and the move relay."""

from tictactoe.net.connection import (
    DEFAULT_PORT,
    ConnectionClosed,
    PeerConnection,
    PeerError,
    PeerListener,
    TransportError,
    ensure_core_application,
    local_addresses,
)
from tictactoe.net.relay import MoveRelay

__all__ = [
    "DEFAULT_PORT",
    "ConnectionClosed",
    "MoveRelay",
    "PeerConnection",
    "PeerError",
    "PeerListener",
    "TransportError",
    "ensure_core_application",
    "local_addresses",
]
