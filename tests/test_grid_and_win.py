import unittest

from game import (
    CanonicalBoard,
    CellValue,
    Mode,
    WinResult,
    active_mask,
    build_visual_grid,
    check_winner,
    create_empty_board,
    display_coords,
    echo_cells,
    is_full,
    map_to_canonical,
    render_grid,
)

X = CellValue.X
O = CellValue.O
E = CellValue.EMPTY


def make_board(rows):
    return CanonicalBoard.from_rows(rows)


def board_with(cells, value=X):
    b = create_empty_board()
    for col, row in cells:
        b = b.with_cell(col, row, value)
    return b


class TestBoardHelpers(unittest.TestCase):
    def test_given_two_empty_boards_when_created_then_independent_and_empty(self):
        a = create_empty_board()
        b = create_empty_board()
        self.assertEqual(a, b)
        self.assertTrue(all(c is E for c in a.cells))
        a2 = a.with_cell(1, 1, X)
        self.assertIs(a.at(1, 1), E)
        self.assertIs(b.at(1, 1), E)
        self.assertIs(a2.at(1, 1), X)

    def test_given_partial_and_full_boards_when_checking_full_then_expected(self):
        self.assertFalse(is_full(create_empty_board()))
        self.assertFalse(is_full(make_board([[X, O, X], [X, O, O], [O, X, E]])))
        self.assertTrue(is_full(make_board([[X, O, X], [X, O, O], [O, X, X]])))

    def test_given_board_when_pretty_then_symbols_and_highlight(self):
        b = make_board([[X, E, E], [E, O, E], [E, E, E]])
        txt = b.pretty(highlight=(1, 1))
        self.assertIn('X', txt)
        self.assertIn('[O]', txt)
        self.assertIn('·', txt)

    def test_given_bad_rows_when_building_board_then_value_error(self):
        with self.assertRaises(ValueError):
            make_board([[X, O], [E, E, E], [E, E, E]])
        with self.assertRaises(ValueError):
            make_board([[X, O, E], [E, E, E]])


class TestVisualGrid(unittest.TestCase):
    SAMPLE = [[X, O, E], [E, X, O], [O, E, E]]

    def test_given_each_mode_when_building_then_cells_match_mapped_center(self):
        board = make_board(self.SAMPLE)
        for mode in Mode:
            grid = build_visual_grid(board, mode)
            self.assertEqual(len(grid), 9)
            self.assertTrue(all(len(r) == 9 for r in grid))
            for gx, gy in display_coords():
                target = map_to_canonical(gx, gy, mode)
                if target is None:
                    self.assertIs(grid[gy][gx], E)
                else:
                    col, row = target
                    self.assertIs(grid[gy][gx], board.at(col, row), f"{mode} {(gx, gy)}")

    def test_given_single_x_on_torus_when_building_then_nine_copies_and_no_win(self):
        board = board_with([(0, 0)])
        grid = build_visual_grid(board, Mode.TORUS)
        xs = {(gx, gy) for gx, gy in display_coords() if grid[gy][gx] is X}
        self.assertEqual(xs, {(0, 0), (3, 0), (6, 0), (0, 3), (3, 3), (6, 3), (0, 6), (3, 6), (6, 6)})
        self.assertIsNone(check_winner(grid))

    def test_given_standard_mode_when_building_then_outer_boards_empty(self):
        board = make_board([[X, X, X], [O, O, O], [X, O, X]])
        grid = build_visual_grid(board, Mode.STANDARD)
        for gx, gy in display_coords():
            if not (3 <= gx <= 5 and 3 <= gy <= 5):
                self.assertIs(grid[gy][gx], E)

    def test_given_same_inputs_when_building_twice_then_equal_results(self):
        board = make_board(self.SAMPLE)
        self.assertEqual(build_visual_grid(board, Mode.KLEIN), build_visual_grid(make_board(self.SAMPLE), Mode.KLEIN))

    def test_given_modes_when_asking_active_mask_then_matches_mapping(self):
        standard = active_mask(Mode.STANDARD)
        self.assertEqual(sum(v for row in standard for v in row), 9)
        self.assertTrue(standard[4][4])
        self.assertFalse(standard[0][0])
        self.assertTrue(all(all(row) for row in active_mask(Mode.PROJECTIVE)))

    def test_given_last_move_when_echoing_then_all_copies_found(self):
        self.assertEqual(echo_cells((0, 0), Mode.STANDARD), frozenset({(3, 3)}))
        torus = echo_cells((0, 0), Mode.TORUS)
        self.assertEqual(len(torus), 9)
        self.assertIn((6, 6), torus)
        klein = echo_cells((2, 0), Mode.KLEIN)
        self.assertIn((3, 6), klein)
        self.assertIn((5, 3), klein)
        self.assertEqual(len(klein), 9)

    def test_given_grid_when_rendering_then_inactive_cells_blank(self):
        board = board_with([(1, 1)])
        txt = render_grid(build_visual_grid(board, Mode.STANDARD), Mode.STANDARD)
        lines = txt.splitlines()
        self.assertEqual(len(lines), 11)
        self.assertEqual(txt.count('X'), 1)
        self.assertEqual(txt.count('·'), 8)
        txt_torus = render_grid(build_visual_grid(board, Mode.TORUS), Mode.TORUS)
        self.assertEqual(txt_torus.count('X'), 9)


class TestWinDetector(unittest.TestCase):
    def test_given_top_row_in_standard_when_checking_then_x_wins_on_center_row(self):
        board = board_with([(0, 0), (1, 0), (2, 0)])
        res = check_winner(build_visual_grid(board, Mode.STANDARD))
        self.assertEqual(res, WinResult(winner=X, line=((3, 3), (4, 3), (5, 3))))

    def test_given_full_board_without_line_in_standard_when_checking_then_draw(self):
        board = make_board([[X, O, X], [X, O, O], [O, X, X]])
        self.assertIsNone(check_winner(build_visual_grid(board, Mode.STANDARD)))
        self.assertTrue(is_full(board))

    def test_given_full_board_with_line_when_checking_then_winner_reported(self):
        board = make_board([[X, X, X], [O, O, X], [X, O, O]])
        self.assertTrue(is_full(board))
        res = check_winner(build_visual_grid(board, Mode.STANDARD))
        self.assertIsNotNone(res)
        self.assertIs(res.winner, X)

    def test_given_broken_diagonal_when_checking_then_only_wrapping_modes_win(self):
        board = board_with([(1, 0), (2, 1), (0, 2)])
        self.assertIsNone(check_winner(build_visual_grid(board, Mode.STANDARD)))
        res = check_winner(build_visual_grid(board, Mode.TORUS))
        self.assertEqual(res, WinResult(winner=X, line=((1, 0), (2, 1), (3, 2))))

    def test_given_vertical_and_anti_diagonal_lines_when_checking_then_directions_found(self):
        col = [[O, E, E], [O, E, E], [O, E, E]]
        res = check_winner(build_visual_grid(make_board(col), Mode.STANDARD))
        self.assertEqual(res.line, ((3, 3), (3, 4), (3, 5)))
        self.assertIs(res.winner, O)

        anti = [[E, E, X], [E, X, E], [X, E, E]]
        res = check_winner(build_visual_grid(make_board(anti), Mode.STANDARD))
        self.assertEqual(res.line, ((3, 5), (4, 4), (5, 3)))

    def test_given_several_lines_when_checking_then_first_in_scan_order(self):
        grid = [[E] * 9 for _ in range(9)]
        for gx in (5, 6, 7):
            grid[2][gx] = O
        for gy in (0, 1, 2):
            grid[gy][8] = X
        res = check_winner(grid)
        self.assertIs(res.winner, X)
        self.assertEqual(res.line, ((8, 0), (8, 1), (8, 2)))

    def test_given_spaced_or_edge_cut_cells_when_checking_then_no_win(self):
        grid = [[E] * 9 for _ in range(9)]
        grid[0][0] = grid[0][3] = grid[0][6] = X
        self.assertIsNone(check_winner(grid))
        grid = [[E] * 9 for _ in range(9)]
        grid[4][7] = grid[4][8] = grid[4][0] = X  # would need wrapping
        self.assertIsNone(check_winner(grid))

    def test_given_empty_grid_when_checking_then_none(self):
        self.assertIsNone(check_winner(build_visual_grid(create_empty_board(), Mode.TORUS)))


if __name__ == '__main__':
    unittest.main(verbosity=2)
