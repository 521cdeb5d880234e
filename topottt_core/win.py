from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .board import CellValue, Coord
from .coords import display_coords, in_bounds

# Scan order is the tie-break when several lines exist: east, south, southeast, northeast.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


@dataclass(frozen=True)
class WinResult:
    winner: CellValue
    line: Tuple[Coord, Coord, Coord]  # display coordinates, in scan direction


def check_winner(grid: Sequence[Sequence[CellValue]]) -> Optional[WinResult]:
    """
    Finds the first three-in-a-row on the 9x9 display, scanning rows top to bottom
    and cells left to right. Lines never wrap past the display edges and only
    adjacent cells count.
    """
    for gx, gy in display_coords():
        cell = grid[gy][gx]
        if cell is CellValue.EMPTY:
            continue
        for ddx, ddy in DIRECTIONS:
            x1, y1 = gx + ddx, gy + ddy
            x2, y2 = gx + 2 * ddx, gy + 2 * ddy
            if not in_bounds(x2, y2):
                continue
            if grid[y1][x1] is cell and grid[y2][x2] is cell:
                return WinResult(winner=cell, line=((gx, gy), (x1, y1), (x2, y2)))
    return None
