from __future__ import annotations

from typing import Iterable, Tuple

from .board import Coord, SIZE

DISPLAY_SIZE = SIZE * SIZE  # 9x9 display made of 3x3 sub-boards


def decompose(gx: int, gy: int) -> Tuple[int, int, int, int]:
    """Splits a display coordinate into (mx, my, lx, ly): sub-board index and position within it."""
    return gx // SIZE, gy // SIZE, gx % SIZE, gy % SIZE


def compose(mx: int, my: int, lx: int, ly: int) -> Coord:
    """Inverse of decompose."""
    return mx * SIZE + lx, my * SIZE + ly


def offset_from_center(mx: int, my: int) -> Tuple[int, int]:
    """Direction of sub-board (mx, my) relative to the center sub-board (1, 1)."""
    return mx - 1, my - 1


def display_coords() -> Iterable[Coord]:
    """Iterates all display coordinates row-major (gy outer, gx inner)."""
    for gy in range(DISPLAY_SIZE):
        for gx in range(DISPLAY_SIZE):
            yield (gx, gy)


def in_bounds(gx: int, gy: int) -> bool:
    return 0 <= gx < DISPLAY_SIZE and 0 <= gy < DISPLAY_SIZE
