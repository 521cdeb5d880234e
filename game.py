from __future__ import annotations

# Facade module that re-exports the topological tic-tac-toe core.
# The Flask app, the CLI entry point and tests import from here.
# Single-responsibility modules live under topottt_core/*.

from topottt_core.board import (  # noqa: F401
    SIZE,
    CanonicalBoard,
    CellValue,
    Coord,
    create_empty_board,
    is_full,
)
from topottt_core.coords import (  # noqa: F401
    DISPLAY_SIZE,
    compose,
    decompose,
    display_coords,
    in_bounds,
    offset_from_center,
)
from topottt_core.symmetry import (  # noqa: F401
    FOLD_TABLE,
    MODE_DESCRIPTIONS,
    MODE_LABELS,
    OFFSETS,
    Fold,
    Mode,
    apply_fold,
    is_active,
    map_to_canonical,
    parse_mode,
    transform_for,
)
from topottt_core.grid import (  # noqa: F401
    VisualGrid,
    active_mask,
    build_visual_grid,
    echo_cells,
    render_grid,
)
from topottt_core.win import DIRECTIONS, WinResult, check_winner  # noqa: F401
from topottt_core.state import (  # noqa: F401
    Action,
    ApplyMove,
    GameState,
    Reset,
    SetMode,
    new_game,
)
from topottt_core.reducer import (  # noqa: F401
    apply_move,
    is_legal_move,
    legal_moves,
    reduce,
    status_text,
)


def main() -> None:
    # CLI driver delegated to topottt_core.cli
    from topottt_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
