"""
Topological tic-tac-toe core Python package.

Pure, stateless helpers for a 3x3 center board shown as a 9x9 display tiled
under a planar symmetry. game.py re-exports everything for the Flask app,
the CLI and tests.
Modules:
- board.py: CellValue, CanonicalBoard, create_empty_board, is_full
- coords.py: display <-> (sub-board, local) coordinate algebra
- symmetry.py: Mode, Fold rule table, map_to_canonical
- grid.py: build_visual_grid, active_mask, echo_cells
- win.py: WinResult, check_winner
- state.py / reducer.py: immutable GameState advanced by reduce()
"""
