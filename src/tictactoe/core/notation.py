"""Decoding of textual moves such as ``"1 2"``."""

from __future__ import annotations

from tictactoe.core.errors import MoveParseError
from tictactoe.core.move import Move


def parse_move(text: str) -> Move:
    """Parse ``"<row> <col>"`` into a :class:`Move`.

    Only decoding happens here; bounds and occupancy are the engine's call.
    Raises :class:`MoveParseError` on a wrong token count, a non-numeric
    token or a negative number.
    """
    cleaned = text.strip()
    tokens = cleaned.split()
    if len(tokens) != 2:
        raise MoveParseError(f"Expected two numbers, got {len(tokens)}: {text!r}")

    coords: list[int] = []
    for token in tokens:
        if not (token.isascii() and token.isdigit()):
            raise MoveParseError(f"Not a non-negative integer: {token!r}")
        coords.append(int(token))

    return Move(coords[0], coords[1], cleaned)
