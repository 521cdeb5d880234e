from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, List, Optional

Coord = Tuple[int, int]  # (x, y): (col, row) on the center board, (gx, gy) on the display

SIZE = 3


class CellValue(Enum):
    """Contents of a board cell. EMPTY is not the same thing as an inactive display cell."""
    EMPTY = None
    X = 'X'
    O = 'O'

    def other(self) -> 'CellValue':
        if self is CellValue.X:
            return CellValue.O
        if self is CellValue.O:
            return CellValue.X
        return CellValue.EMPTY

    @property
    def symbol(self) -> str:
        return self.value if self.value is not None else '·'


@dataclass(frozen=True)
class CanonicalBoard:
    """The authoritative 3x3 center board. Immutable; moves produce new boards."""
    cells: Tuple[CellValue, ...]  # row-major, length == 9

    def index(self, col: int, row: int) -> int:
        """Calculates the 1D index for a given column and row."""
        return row * SIZE + col

    def at(self, col: int, row: int) -> CellValue:
        return self.cells[self.index(col, row)]

    def with_cell(self, col: int, row: int, value: CellValue) -> 'CanonicalBoard':
        """Returns a copy of the board with one cell replaced."""
        cells: List[CellValue] = list(self.cells)
        cells[self.index(col, row)] = value
        return CanonicalBoard(tuple(cells))

    def rows(self) -> Tuple[Tuple[CellValue, ...], ...]:
        return tuple(self.cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE))

    def pretty(self, highlight: Optional[Coord] = None) -> str:
        """Generates a human-readable string of the board, bracketing `highlight` if given."""
        lines: List[str] = []
        for row in range(SIZE):
            parts: List[str] = []
            for col in range(SIZE):
                sym = self.at(col, row).symbol
                parts.append(f"[{sym}]" if highlight == (col, row) else f" {sym} ")
            lines.append("".join(parts).rstrip())
        return "\n".join(lines)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[CellValue]]) -> 'CanonicalBoard':
        flat: List[CellValue] = []
        for r in rows:
            row = list(r)
            if len(row) != SIZE:
                raise ValueError(f'expected {SIZE} cells per row, got {len(row)}')
            flat.extend(row)
        if len(flat) != SIZE * SIZE:
            raise ValueError(f'expected {SIZE} rows')
        return cls(tuple(flat))


def create_empty_board() -> CanonicalBoard:
    """Creates a fresh board with every cell EMPTY."""
    return CanonicalBoard(tuple(CellValue.EMPTY for _ in range(SIZE * SIZE)))


def is_full(board: CanonicalBoard) -> bool:
    """True when no cell is EMPTY. Says nothing about winners; check those first."""
    return all(cell is not CellValue.EMPTY for cell in board.cells)
