from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .board import Coord
from .grid import render_grid
from .reducer import apply_move, is_legal_move, legal_moves, status_text
from .state import GameState, new_game
from .symmetry import MODE_DESCRIPTIONS, MODE_LABELS, Mode, map_to_canonical, parse_mode

logger = logging.getLogger(__name__)


def parse_cell(text: str) -> Coord:
    """Parses 'gx,gy' or 'gx gy' into a display coordinate."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.strip().split(sep) if t != '']
    if len(parts) != 2:
        raise ValueError(f"expected two integers, got {text!r}")
    gx, gy = int(parts[0]), int(parts[1])
    if not (0 <= gx <= 8 and 0 <= gy <= 8):
        raise ValueError(f"cell out of range: {gx},{gy}")
    return gx, gy


def show(state: GameState) -> None:
    print(render_grid(state.visual_grid, state.mode))
    if state.last_move is not None:
        print("Center board:")
        print(state.board.pretty(highlight=state.last_move))
    print(status_text(state))


def _play_scripted(state: GameState, moves: List[Coord]) -> int:
    for gx, gy in moves:
        if not is_legal_move(state, gx, gy):
            logger.error("Illegal move %d,%d (maps to %s)", gx, gy, map_to_canonical(gx, gy, state.mode))
            return 2
        state = apply_move(state, gx, gy)
        logger.info("%s played %d,%d -> center %s", state.turn.other().value, gx, gy, state.last_move)
    show(state)
    return 0


def _play_interactive(state: GameState) -> int:
    show(state)
    while not state.is_over:
        try:
            text = input(f"{state.turn.value} to move, enter gx,gy (or q): ").strip()
        except EOFError:
            print()
            return 0
        if text.lower() in ('q', 'quit', 'exit'):
            return 0
        try:
            gx, gy = parse_cell(text)
        except ValueError as e:
            print(f"Could not parse: {e}. Try again.")
            continue
        if not is_legal_move(state, gx, gy):
            print('Illegal move. Legal cells:', legal_moves(state))
            continue
        state = apply_move(state, gx, gy)
        show(state)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Topological tic-tac-toe on a 9x9 tiled display')
    parser.add_argument('--mode', default=Mode.TORUS.value, choices=[m.value for m in Mode],
                        help='Symmetry mode used to tile the center board')
    parser.add_argument('--moves', default=None,
                        help='Space-separated display cells to play, e.g. "3,3 4,4 0,0"')
    parser.add_argument('--play', action='store_true', help='Play interactively, two players at one terminal')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    mode = parse_mode(args.mode)
    state = new_game(mode)
    print(f"{MODE_LABELS[mode]}: {MODE_DESCRIPTIONS[mode]}")

    if args.play:
        return _play_interactive(state)

    moves: List[Coord] = []
    if args.moves:
        try:
            moves = [parse_cell(tok) for tok in args.moves.split()]
        except ValueError as e:
            logger.error("Bad --moves value: %s", e)
            return 2
    return _play_scripted(state, moves)


if __name__ == '__main__':
    sys.exit(main())
