"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate ``(row, col)`` pair plus the text it was decoded from.

    ``text`` is what gets forwarded to a peer after the move is accepted,
    so both sides replay exactly the same input.
    """

    row: int
    col: int
    text: str = ""

    def __post_init__(self) -> None:
        if not self.text:
            object.__setattr__(self, "text", f"{self.row} {self.col}")

    def __str__(self) -> str:
        return self.text

    @property
    def cell(self) -> tuple[int, int]:
        return (self.row, self.col)
