"""
Symmetry modes and the coordinate folding rules they induce.

Each of the 8 outer sub-boards of the 9x9 display is a copy of the center
board, possibly reflected. The reflection depends only on the mode and on the
sub-board's offset (dx, dy) from the center. Rules are plain descriptors
(Fold) looked up in one table; `apply_fold` is the only place that turns a
descriptor into coordinates.

Every Fold is its own inverse, so the same lookup serves both directions:
"which center cell is shown here" when building the display, and "which
center cell does this click land on" when playing a move.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from .board import Coord, SIZE
from .coords import decompose, offset_from_center


class Mode(Enum):
    STANDARD = 'standard'
    TORUS = 'torus'
    KLEIN = 'klein'
    PROJECTIVE = 'projective'


MODE_LABELS: Dict[Mode, str] = {
    Mode.STANDARD: 'Standard',
    Mode.TORUS: 'Torus (p1)',
    Mode.KLEIN: 'Klein Bottle (pg)',
    Mode.PROJECTIVE: 'Projective Plane (p2)',
}

MODE_DESCRIPTIONS: Dict[Mode, str] = {
    Mode.STANDARD: 'Standard tic-tac-toe. Only the center board is active.',
    Mode.TORUS: (
        'Torus (p1): Opposite edges are identified. All boards are exact clones; '
        'the plane tiles by pure translation.'
    ),
    Mode.KLEIN: (
        'Klein Bottle (pg): Left/right edges glue normally, but top/bottom edges '
        'glue with a horizontal flip, a glide reflection.'
    ),
    Mode.PROJECTIVE: (
        'Projective Plane (p2): Each pair of opposite edges glues with a flip, '
        'equivalent to a 180° rotation at each lattice point.'
    ),
}


def parse_mode(text: str) -> Mode:
    """Parses a mode name such as 'klein' or 'KLEIN'. Raises ValueError for anything else."""
    key = str(text).strip().lower()
    for mode in Mode:
        if mode.value == key:
            return mode
    raise ValueError(f"Unknown mode: {text!r} (expected one of {', '.join(m.value for m in Mode)})")


class Fold(Enum):
    IDENTITY = 'identity'
    FLIP_COL = 'flip_col'    # col -> 2 - col
    FLIP_ROW = 'flip_row'    # row -> 2 - row
    FLIP_BOTH = 'flip_both'  # 180 degree rotation


Offset = Tuple[int, int]
OFFSETS: Tuple[Offset, ...] = tuple((dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1))


def _klein_fold(dx: int, dy: int) -> Fold:
    # Crossing a top/bottom edge mirrors left and right.
    return Fold.FLIP_COL if dy != 0 else Fold.IDENTITY


def _projective_fold(dx: int, dy: int) -> Fold:
    if dx != 0 and dy != 0:
        return Fold.FLIP_BOTH
    if dy != 0:
        return Fold.FLIP_COL
    if dx != 0:
        return Fold.FLIP_ROW
    return Fold.IDENTITY


def _build_fold_table() -> Dict[Tuple[Mode, Offset], Fold]:
    table: Dict[Tuple[Mode, Offset], Fold] = {}
    for dx, dy in OFFSETS:
        # Standard has no entries off-center: those sub-boards are inactive.
        if (dx, dy) == (0, 0):
            table[(Mode.STANDARD, (dx, dy))] = Fold.IDENTITY
        table[(Mode.TORUS, (dx, dy))] = Fold.IDENTITY
        table[(Mode.KLEIN, (dx, dy))] = _klein_fold(dx, dy)
        table[(Mode.PROJECTIVE, (dx, dy))] = _projective_fold(dx, dy)
    return table


FOLD_TABLE: Dict[Tuple[Mode, Offset], Fold] = _build_fold_table()


def transform_for(mode: Mode, dx: int, dy: int) -> Optional[Fold]:
    """Folding rule for the sub-board at offset (dx, dy), or None when that sub-board is inactive."""
    return FOLD_TABLE.get((mode, (dx, dy)))


def apply_fold(fold: Fold, lx: int, ly: int) -> Coord:
    """Applies a folding rule to a local coordinate, returning (col, row)."""
    last = SIZE - 1
    if fold is Fold.IDENTITY:
        return lx, ly
    if fold is Fold.FLIP_COL:
        return last - lx, ly
    if fold is Fold.FLIP_ROW:
        return lx, last - ly
    if fold is Fold.FLIP_BOTH:
        return last - lx, last - ly
    raise ValueError(f"Unknown fold: {fold!r}")


def map_to_canonical(gx: int, gy: int, mode: Mode) -> Optional[Coord]:
    """
    Maps a display coordinate to the center-board (col, row) it mirrors.
    Returns None when the display cell is not a live board position under `mode`.
    """
    mx, my, lx, ly = decompose(gx, gy)
    dx, dy = offset_from_center(mx, my)
    fold = transform_for(mode, dx, dy)
    if fold is None:
        return None
    return apply_fold(fold, lx, ly)


def is_active(gx: int, gy: int, mode: Mode) -> bool:
    return map_to_canonical(gx, gy, mode) is not None
