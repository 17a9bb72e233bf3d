"""Line-framed TCP connection between two peers (Qt blocking sockets).

Only the blocking half of the QtNetwork API is used, so no event loop is
needed; a ``QCoreApplication`` should still exist (see
:func:`ensure_core_application`).  Long waits are sliced so that Ctrl-C
reaches the interpreter between slices.
"""

from __future__ import annotations

import logging
import sys
import time

from PyQt6.QtCore import QByteArray, QCoreApplication
from PyQt6.QtNetwork import (
    QAbstractSocket,
    QHostAddress,
    QNetworkInterface,
    QTcpServer,
    QTcpSocket,
)

from tictactoe.game.interfaces import GameAborted

_LOGGER = logging.getLogger(__name__)

DEFAULT_PORT = 4567
_SLICE_MS = 500
_CLOSE_WAIT_MS = 1000
_ENCODING = "utf-8"

_app: QCoreApplication | None = None


class PeerError(GameAborted):
    """The peer connection can no longer be used."""


class ConnectionClosed(PeerError):
    """The peer closed the connection."""


class TransportError(PeerError):
    """Bind, connect, write or timeout failure."""


def ensure_core_application() -> QCoreApplication:
    """Return the running Qt application, creating a console one if needed."""
    global _app
    app = QCoreApplication.instance()
    if app is None:
        _app = QCoreApplication(sys.argv[:1])
        app = _app
    return app


def local_addresses() -> list[str]:
    """Non-loopback IPv4 addresses of this machine."""
    addrs: list[str] = []
    for addr in QNetworkInterface.allAddresses():
        if addr.isLoopback():
            continue
        if addr.protocol() != QAbstractSocket.NetworkLayerProtocol.IPv4Protocol:
            continue
        addrs.append(addr.toString())
    return addrs


def _deadline(timeout: float | None) -> float | None:
    return None if timeout is None else time.monotonic() + timeout


def _slice_ms(deadline: float | None) -> int:
    if deadline is None:
        return _SLICE_MS
    left = int((deadline - time.monotonic()) * 1000)
    return max(0, min(_SLICE_MS, left))


def _expired(deadline: float | None) -> bool:
    return deadline is not None and time.monotonic() >= deadline


class PeerListener:
    """Listening side of a game; hands out a single :class:`PeerConnection`."""

    __slots__ = ("_server",)

    def __init__(self, bind: str = "0.0.0.0", port: int = DEFAULT_PORT) -> None:
        address = QHostAddress(bind)
        if address.isNull():
            raise TransportError(f"Invalid bind address: {bind!r}")
        self._server = QTcpServer()
        if not self._server.listen(address, port):
            message = self._server.errorString()
            self._server.close()
            raise TransportError(f"Cannot listen on {bind}:{port}: {message}")
        _LOGGER.info("Listening on %s:%d", bind, self.port)

    @property
    def port(self) -> int:
        return self._server.serverPort()

    def accept(self, timeout: float | None = None) -> PeerConnection:
        """Wait for the opponent. ``timeout=None`` waits forever."""
        deadline = _deadline(timeout)
        while not self._server.hasPendingConnections():
            if _expired(deadline):
                raise TransportError("Timed out waiting for an opponent")
            self._server.waitForNewConnection(_slice_ms(deadline))

        socket = self._server.nextPendingConnection()
        # The server owns accepted sockets; the connection must outlive it.
        socket.setParent(None)
        # One opponent per game.
        self._server.close()
        connection = PeerConnection(socket)
        _LOGGER.info("Opponent connected from %s", connection.peer_address)
        return connection

    def close(self) -> None:
        self._server.close()

    def __enter__(self) -> PeerListener:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class PeerConnection:
    """Newline-framed UTF-8 text stream to the peer."""

    __slots__ = ("_socket",)

    def __init__(self, socket: QTcpSocket) -> None:
        self._socket = socket

    @classmethod
    def connect(
        cls,
        host: str,
        port: int = DEFAULT_PORT,
        timeout: float | None = 10.0,
    ) -> PeerConnection:
        socket = QTcpSocket()
        socket.connectToHost(host, port)
        msecs = -1 if timeout is None else int(timeout * 1000)
        if not socket.waitForConnected(msecs):
            message = socket.errorString()
            socket.abort()
            raise TransportError(f"Cannot connect to {host}:{port}: {message}")
        _LOGGER.info("Connected to %s:%d", host, port)
        return cls(socket)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return (
            self._socket.state() == QAbstractSocket.SocketState.ConnectedState
        )

    @property
    def peer_address(self) -> str:
        return f"{self._socket.peerAddress().toString()}:{self._socket.peerPort()}"

    # ── I/O ──────────────────────────────────────────────────────────────

    def send_line(self, text: str) -> None:
        """Send *text* as one frame. Embedded newlines are not allowed."""
        if "\n" in text:
            raise ValueError("A frame cannot contain a newline")
        if not self.is_open:
            raise ConnectionClosed("Connection to peer is closed")

        data = (text + "\n").encode(_ENCODING)
        if self._socket.write(data) != len(data):
            raise TransportError(f"Send failed: {self._socket.errorString()}")
        while self._socket.bytesToWrite() > 0:
            if not self._socket.waitForBytesWritten(_CLOSE_WAIT_MS * 5):
                raise TransportError(f"Send failed: {self._socket.errorString()}")
        _LOGGER.debug("Sent %r to %s", text, self.peer_address)

    def receive_line(self, timeout: float | None = None) -> str:
        """Block until one full frame arrives and return it without newline.

        Raises:
            ConnectionClosed: the peer went away before a frame arrived.
            TransportError: *timeout* seconds passed without a frame.
        """
        deadline = _deadline(timeout)
        while not self._socket.canReadLine():
            if not self.is_open:
                if self._socket.bytesAvailable() > 0:
                    # Trailing frame without a newline.
                    return self._decode(self._socket.readAll())
                raise ConnectionClosed("Peer disconnected")
            if _expired(deadline):
                raise TransportError("Timed out waiting for the peer")
            self._socket.waitForReadyRead(_slice_ms(deadline))

        return self._decode(self._socket.readLine())

    def close(self) -> None:
        if self._socket.state() == QAbstractSocket.SocketState.UnconnectedState:
            self._socket.close()
            return
        self._socket.disconnectFromHost()
        if self._socket.state() != QAbstractSocket.SocketState.UnconnectedState:
            self._socket.waitForDisconnected(_CLOSE_WAIT_MS)
        self._socket.close()
        _LOGGER.info("Connection closed")

    def __enter__(self) -> PeerConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _decode(raw: QByteArray) -> str:
        return raw.data().decode(_ENCODING, errors="replace").rstrip("\r\n")
