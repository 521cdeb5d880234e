from __future__ import annotations

from functools import lru_cache
from typing import FrozenSet, List, Tuple

from .board import CanonicalBoard, CellValue, Coord, SIZE
from .coords import DISPLAY_SIZE, compose, display_coords, offset_from_center
from .symmetry import Mode, apply_fold, map_to_canonical, transform_for

VisualGrid = Tuple[Tuple[CellValue, ...], ...]  # grid[gy][gx]


@lru_cache(maxsize=256)
def build_visual_grid(board: CanonicalBoard, mode: Mode) -> VisualGrid:
    """
    Builds the 9x9 display from the center board. Inactive cells come out EMPTY,
    indistinguishable by value from playable empty cells; use active_mask for that.
    """
    grid: List[List[CellValue]] = [[CellValue.EMPTY] * DISPLAY_SIZE for _ in range(DISPLAY_SIZE)]
    for my in range(SIZE):
        for mx in range(SIZE):
            dx, dy = offset_from_center(mx, my)
            fold = transform_for(mode, dx, dy)
            if fold is None:
                continue
            for ly in range(SIZE):
                for lx in range(SIZE):
                    gx, gy = compose(mx, my, lx, ly)
                    col, row = apply_fold(fold, lx, ly)
                    grid[gy][gx] = board.at(col, row)
    return tuple(tuple(r) for r in grid)


@lru_cache(maxsize=None)
def active_mask(mode: Mode) -> Tuple[Tuple[bool, ...], ...]:
    """mask[gy][gx] is True where the display cell is playable under `mode`."""
    return tuple(
        tuple(map_to_canonical(gx, gy, mode) is not None for gx in range(DISPLAY_SIZE))
        for gy in range(DISPLAY_SIZE)
    )


def echo_cells(canonical: Coord, mode: Mode) -> FrozenSet[Coord]:
    """All display coordinates that show the center-board cell `canonical`."""
    return frozenset(
        (gx, gy) for gx, gy in display_coords()
        if map_to_canonical(gx, gy, mode) == canonical
    )


def render_grid(grid: VisualGrid, mode: Mode) -> str:
    """Text rendering of the display; inactive cells are blank, sub-boards separated by bars."""
    mask = active_mask(mode)
    lines: List[str] = []
    for gy in range(DISPLAY_SIZE):
        if gy and gy % SIZE == 0:
            lines.append("------+-------+------")
        parts: List[str] = []
        for gx in range(DISPLAY_SIZE):
            if gx and gx % SIZE == 0:
                parts.append("|")
            parts.append(grid[gy][gx].symbol if mask[gy][gx] else " ")
        lines.append(" ".join(parts))
    return "\n".join(lines)
