from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .board import CanonicalBoard, CellValue, Coord, create_empty_board, is_full
from .grid import VisualGrid, build_visual_grid
from .symmetry import Mode
from .win import WinResult, check_winner


@dataclass(frozen=True)
class GameState:
    """One session: the mode, the center board, whose turn it is and the last canonical cell played."""
    mode: Mode
    board: CanonicalBoard
    turn: CellValue  # X or O
    last_move: Optional[Coord] = None

    @property
    def visual_grid(self) -> VisualGrid:
        return build_visual_grid(self.board, self.mode)

    @property
    def result(self) -> Optional[WinResult]:
        return check_winner(self.visual_grid)

    @property
    def is_draw(self) -> bool:
        # A full board with a line on it is a win, not a draw.
        return self.result is None and is_full(self.board)

    @property
    def is_over(self) -> bool:
        return self.result is not None or is_full(self.board)


def new_game(mode: Mode = Mode.TORUS) -> GameState:
    return GameState(mode=mode, board=create_empty_board(), turn=CellValue.X, last_move=None)


@dataclass(frozen=True)
class ApplyMove:
    gx: int
    gy: int


@dataclass(frozen=True)
class SetMode:
    mode: Mode


@dataclass(frozen=True)
class Reset:
    pass


Action = Union[ApplyMove, SetMode, Reset]
