import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from topottt_core.cli import main, parse_cell


class TestCli(unittest.TestCase):
    def _run(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main(argv)
        return code, buf.getvalue()

    def test_given_cell_text_when_parsing_then_coords_or_value_error(self):
        self.assertEqual(parse_cell("3,6"), (3, 6))
        self.assertEqual(parse_cell(" 4 5 "), (4, 5))
        for bad in ("3", "a,b", "9,0", "1,2,3"):
            with self.assertRaises(ValueError):
                parse_cell(bad)

    def test_given_winning_script_when_run_then_reports_winner(self):
        code, out = self._run(["--mode", "standard", "--moves", "3,3 3,4 4,3 4,4 5,3"])
        self.assertEqual(code, 0)
        self.assertIn("X wins!", out)
        self.assertIn("Standard", out)

    def test_given_no_moves_when_run_then_prints_empty_board(self):
        code, out = self._run(["--mode", "torus"])
        self.assertEqual(code, 0)
        self.assertIn("Torus (p1)", out)
        self.assertIn("Turn: X", out)
        self.assertEqual(out.count("·"), 81)

    def test_given_illegal_script_when_run_then_exit_code_two(self):
        with self.assertLogs("topottt_core.cli", level="ERROR"):
            code, _ = self._run(["--mode", "standard", "--moves", "0,0"])
        self.assertEqual(code, 2)
        with self.assertLogs("topottt_core.cli", level="ERROR"):
            code, _ = self._run(["--mode", "standard", "--moves", "x"])
        self.assertEqual(code, 2)

    def test_given_interactive_play_when_inputs_given_then_game_advances(self):
        inputs = iter(["nonsense", "0,0", "4,4", "q"])
        with patch("builtins.input", lambda _prompt: next(inputs)):
            code, out = self._run(["--mode", "standard", "--play"])
        self.assertEqual(code, 0)
        self.assertIn("Could not parse", out)
        self.assertIn("Illegal move", out)
        self.assertIn("Turn: O", out)

    def test_given_end_of_input_when_playing_then_exits_cleanly(self):
        def _eof(_prompt):
            raise EOFError
        with patch("builtins.input", _eof):
            code, out = self._run(["--mode", "klein", "--play"])
        self.assertEqual(code, 0)
        self.assertIn("Turn: X", out)

    def test_given_klein_move_when_run_then_center_board_highlights_folded_cell(self):
        code, out = self._run(["--mode", "klein", "--moves", "3,6"])
        self.assertEqual(code, 0)
        self.assertIn("Center board:", out)
        center = out.split("Center board:\n", 1)[1].splitlines()
        self.assertIn("[X]", center[0])
        self.assertTrue(center[0].endswith("[X]"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
