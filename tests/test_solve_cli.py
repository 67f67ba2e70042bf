import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from eightpuzzle.experiments.solve import main


class SolveCliTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, text):
        path = os.path.join(self.tmp.name, "board.txt")
        with open(path, "w") as f:
            f.write(text)
        return path

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_solves_and_prints_each_step(self):
        code, out, _ = self.run_main([self.write("0 1 3\n4 2 5\n7 8 6\n")])
        self.assertEqual(0, code)
        lines = out.splitlines()
        self.assertEqual("Start", lines[0])
        moves = [l for l in lines if l in ("Up", "Down", "Left", "Right")]
        self.assertEqual(["Right", "Down", "Right", "Down"], moves)
        self.assertIn("| 7 | 8 |   |", out)
        self.assertIn("Total steps: 4", out)
        self.assertTrue(lines[-1].startswith("Elapsed: "))

    def test_non_utf8_bytes_are_ignored(self):
        path = os.path.join(self.tmp.name, "board.bin")
        with open(path, "wb") as f:
            f.write(b"0 1 3\xff\n4 2 5\xe9\n7 8 6\n")
        code, out, _ = self.run_main([path])
        self.assertEqual(0, code)
        self.assertIn("Total steps: 4", out)

    def test_heuristic_option(self):
        code, out, _ = self.run_main([self.write("0 1 3 4 2 5 7 8 6"), "--heuristic", "linear_conflict"])
        self.assertEqual(0, code)
        self.assertIn("Total steps: 4", out)

    def test_missing_argument_exits_nonzero(self):
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            main([])
        self.assertNotEqual(0, ctx.exception.code)
        self.assertIn("usage", err.getvalue())

    def test_unreadable_file(self):
        code, _, err = self.run_main([os.path.join(self.tmp.name, "missing.txt")])
        self.assertEqual(1, code)
        self.assertIn("cannot open", err)

    def test_too_few_digits(self):
        code, _, err = self.run_main([self.write("1 2 3 4 5")])
        self.assertEqual(1, code)
        self.assertIn("at least 9 digits", err)

    def test_board_without_blank(self):
        code, _, err = self.run_main([self.write("123456788")])
        self.assertEqual(1, code)
        self.assertIn("blank", err)

    def test_unsolvable_board(self):
        code, out, _ = self.run_main([self.write("213\n456\n780\n"), "--max-expansions", "1000000"])
        self.assertEqual(1, code)
        self.assertIn("No solution", out)

    def test_expansion_limit(self):
        code, out, _ = self.run_main([self.write("867254301"), "--max-expansions", "5"])
        self.assertEqual(1, code)
        self.assertIn("Gave up after 5 expansions", out)


if __name__ == "__main__":
    unittest.main()
