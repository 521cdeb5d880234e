from __future__ import annotations

import logging
from typing import List

from .board import CellValue, Coord
from .coords import display_coords
from .state import Action, ApplyMove, GameState, Reset, SetMode, new_game
from .symmetry import map_to_canonical

logger = logging.getLogger(__name__)


def is_legal_move(state: GameState, gx: int, gy: int) -> bool:
    """A move is legal when the game is still running and the click lands on an empty live cell."""
    if state.is_over:
        return False
    target = map_to_canonical(gx, gy, state.mode)
    if target is None:
        return False
    col, row = target
    return state.board.at(col, row) is CellValue.EMPTY


def legal_moves(state: GameState) -> List[Coord]:
    """Every display coordinate a move may be played on, row-major."""
    if state.is_over:
        return []
    return [(gx, gy) for gx, gy in display_coords() if is_legal_move(state, gx, gy)]


def apply_move(state: GameState, gx: int, gy: int) -> GameState:
    """Plays the current player's mark at the center cell under (gx, gy). Illegal moves return `state` as is."""
    if not is_legal_move(state, gx, gy):
        logger.debug("ignoring illegal move (%d, %d) in %s", gx, gy, state.mode.value)
        return state
    target = map_to_canonical(gx, gy, state.mode)
    if target is None:
        return state
    col, row = target
    board = state.board.with_cell(col, row, state.turn)
    return GameState(mode=state.mode, board=board, turn=state.turn.other(), last_move=(col, row))


def reduce(state: GameState, action: Action) -> GameState:
    """Advances the session by one action and returns the new state; `state` is never modified."""
    if isinstance(action, ApplyMove):
        return apply_move(state, action.gx, action.gy)
    if isinstance(action, SetMode):
        # Display semantics change entirely with the mode, so the board is discarded.
        logger.debug("mode change %s -> %s", state.mode.value, action.mode.value)
        return new_game(action.mode)
    if isinstance(action, Reset):
        return new_game(state.mode)
    raise TypeError(f"Unknown action: {action!r}")


def status_text(state: GameState) -> str:
    res = state.result
    if res is not None:
        return f"{res.winner.value} wins!"
    if state.is_draw:
        return "Draw!"
    return f"Turn: {state.turn.value}"
