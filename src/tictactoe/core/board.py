"""Board - mark placement on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterator

from tictactoe.core.enums import Mark

SIZE = 3

Cell = tuple[int, int]

# Rows, columns, then the two diagonals.
LINES: tuple[tuple[Cell, Cell, Cell], ...] = (
    *(((r, 0), (r, 1), (r, 2)) for r in range(SIZE)),
    *(((0, c), (1, c), (2, c)) for c in range(SIZE)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

_GLYPHS: dict[Mark | None, str] = {
    Mark.FIRST: " X ",
    Mark.SECOND: " O ",
    None: " . ",
}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


class Board:
    """Mutable 3x3 grid of optional marks."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Mark | None]] = [
            [None] * SIZE for _ in range(SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Mark | None:
        row, col = cell
        return self._cells[row][col]

    def __setitem__(self, cell: Cell, mark: Mark) -> None:
        row, col = cell
        if self._cells[row][col] is not None:
            raise ValueError(f"Cell {cell} is already occupied")
        self._cells[row][col] = mark

    def is_occupied(self, row: int, col: int) -> bool:
        return self._cells[row][col] is not None

    # -- Query helpers ------------------------------------------------------

    def rows(self) -> Iterator[tuple[Mark | None, ...]]:
        for row in self._cells:
            yield tuple(row)

    def mark_count(self) -> int:
        return sum(cell is not None for row in self._cells for cell in row)

    def is_full(self) -> bool:
        return all(cell is not None for row in self._cells for cell in row)

    def is_empty(self) -> bool:
        return all(cell is None for row in self._cells for cell in row)

    def line_owner(self) -> Mark | None:
        """Mark holding a complete line, or ``None``."""
        for a, b, c in LINES:
            mark = self[a]
            if mark is not None and self[b] == mark and self[c] == mark:
                return mark
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    def as_tuple(self) -> tuple[tuple[Mark | None, ...], ...]:
        return tuple(self.rows())

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        return "\n".join(
            "".join(_GLYPHS[cell] for cell in row) for row in self._cells
        )

    def __repr__(self) -> str:
        return f"Board(\n{self}\n)"
