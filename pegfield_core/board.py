from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import ConfigurationError
from .keys import parse_coord_key

Coord = Tuple[int, int]


class Cell(str, Enum):
    PEG = "peg"
    EMPTY = "empty"
    VOID = "void"


_SYMBOLS = {Cell.PEG: "o", Cell.EMPTY: ".", Cell.VOID: " "}


class Board:
    """Square grid of cell statuses with a fixed set of void coordinates.

    The grid is owned by the board: layouts are deep-copied on the way in and
    ``copy()`` never shares row lists, so two boards can be mutated
    independently.
    """

    def __init__(self, size: int, cells: List[List[Cell]], voids: FrozenSet[Coord]) -> None:
        self.size = size
        self._cells = cells
        self.voids = voids

    @classmethod
    def from_layout(
        cls,
        layout: Sequence[Sequence[Any]],
        void_cells: Iterable[Any] = (),
        size: Optional[int] = None,
    ) -> "Board":
        """Builds a board from a boolean peg layout and a set of void coordinates."""
        n = len(layout)
        if n == 0:
            raise ConfigurationError("layout must have at least one row")
        if size is not None and size != n:
            raise ConfigurationError(f"layout has {n} rows, expected {size}")
        for r, row in enumerate(layout):
            if len(row) != n:
                raise ConfigurationError(f"row {r} has {len(row)} cells, expected {n}")

        voids = set()
        for raw in void_cells:
            coord = parse_coord_key(raw)
            if not (0 <= coord[0] < n and 0 <= coord[1] < n):
                raise ConfigurationError(f"void cell {coord} is outside the {n}x{n} board")
            voids.add(coord)

        cells: List[List[Cell]] = []
        for r in range(n):
            line: List[Cell] = []
            for c in range(n):
                if (r, c) in voids:
                    line.append(Cell.VOID)
                elif layout[r][c]:
                    line.append(Cell.PEG)
                else:
                    line.append(Cell.EMPTY)
            cells.append(line)
        return cls(n, cells, frozenset(voids))

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.size and 0 <= c < self.size

    def at(self, r: int, c: int) -> Cell:
        """Gets the status of a cell; callers check bounds first."""
        return self._cells[r][c]

    def set(self, coord: Coord, status: Cell) -> None:
        r, c = coord
        if self._cells[r][c] is Cell.VOID or status is Cell.VOID:
            raise ValueError(f"void status of {coord} is fixed at construction")
        self._cells[r][c] = status

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def peg_count(self) -> int:
        return sum(1 for line in self._cells for cell in line if cell is Cell.PEG)

    def copy(self) -> "Board":
        return Board(self.size, [list(line) for line in self._cells], self.voids)

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(line) for line in self._cells)

    def to_layout(self) -> List[List[bool]]:
        return [[cell is Cell.PEG for cell in line] for line in self._cells]

    def pretty(self, selected: Optional[Coord] = None) -> str:
        """Generates a human-readable string of the board, the selected peg shown as '@'."""
        width = len(str(self.size - 1))
        header = " " * (width + 1) + " ".join(str(c % 10) for c in range(self.size))
        lines: List[str] = [header]
        for r, line in enumerate(self._cells):
            row: List[str] = []
            for c, cell in enumerate(line):
                if selected == (r, c):
                    row.append("@")
                else:
                    row.append(_SYMBOLS[cell])
            lines.append(f"{r:>{width}} " + " ".join(row))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Board) and self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        return f"Board(size={self.size}, pegs={self.peg_count()})"
