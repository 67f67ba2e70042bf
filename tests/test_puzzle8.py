import unittest

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    InvalidBoardError,
    Move,
    apply_move,
    fingerprint,
    format_board,
    is_solvable,
    legal_moves,
    make_unsolvable,
    parse_board,
    scramble,
    successors,
    validate_board,
)


class StateModelTestCase(unittest.TestCase):
    def test_legal_moves_depend_on_blank_position(self):
        self.assertEqual([Move.DOWN, Move.RIGHT], legal_moves((0, 1, 2, 3, 4, 5, 6, 7, 8)))
        self.assertEqual([Move.UP, Move.LEFT], legal_moves(GOAL))
        self.assertEqual(
            [Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT],
            legal_moves((1, 2, 3, 4, 0, 5, 6, 7, 8)),
        )

    def test_apply_move_slides_blank(self):
        board = (1, 2, 3, 4, 0, 5, 6, 7, 8)
        self.assertEqual((1, 0, 3, 4, 2, 5, 6, 7, 8), apply_move(board, Move.UP))
        self.assertEqual((1, 2, 3, 4, 7, 5, 6, 0, 8), apply_move(board, Move.DOWN))
        self.assertEqual((1, 2, 3, 0, 4, 5, 6, 7, 8), apply_move(board, Move.LEFT))
        self.assertEqual((1, 2, 3, 4, 5, 0, 6, 7, 8), apply_move(board, Move.RIGHT))
        # input board unchanged
        self.assertEqual((1, 2, 3, 4, 0, 5, 6, 7, 8), board)

    def test_apply_move_rejects_leaving_the_grid(self):
        self.assertIsNone(apply_move(GOAL, Move.DOWN))
        self.assertIsNone(apply_move(GOAL, Move.RIGHT))
        self.assertIsNone(apply_move(GOAL, Move.START))

    def test_successors_match_apply_move(self):
        board = (1, 2, 3, 4, 0, 5, 6, 7, 8)
        succ = successors(board)
        self.assertEqual(4, len(succ))
        for move, nxt in succ:
            self.assertEqual(apply_move(board, move), nxt)

    def test_fingerprint_is_positional_decimal(self):
        self.assertEqual(87654321, fingerprint(GOAL))
        self.assertEqual(876543210, fingerprint((0, 1, 2, 3, 4, 5, 6, 7, 8)))

    def test_fingerprint_distinguishes_reachable_boards(self):
        seen = {}
        frontier = [GOAL]
        while frontier and len(seen) < 2000:
            s = frontier.pop()
            key = fingerprint(s)
            if key in seen:
                self.assertEqual(seen[key], s)
                continue
            self.assertGreater(key, 0)
            seen[key] = s
            frontier.extend(b for _, b in successors(s))

    def test_parse_board_ignores_non_digits(self):
        self.assertEqual(GOAL, parse_board("1 2 3\n4 5 6\n7 8 0\n"))
        self.assertEqual(GOAL, parse_board("[1,2,3],[4,5,6],[7,8,0] 99"))

    def test_parse_board_needs_nine_digits(self):
        with self.assertRaises(InvalidBoardError):
            parse_board("1 2 3 4 5 6 7 8")
        with self.assertRaises(InvalidBoardError):
            parse_board("")

    def test_validate_board_rejects_malformed(self):
        with self.assertRaises(InvalidBoardError):
            validate_board((1, 2, 3, 4, 5, 6, 7, 8, 8))  # no blank
        with self.assertRaises(InvalidBoardError):
            validate_board((0, 0, 3, 4, 5, 6, 7, 8, 1))
        with self.assertRaises(InvalidBoardError):
            validate_board((9, 0, 3, 4, 5, 6, 7, 8, 1))
        with self.assertRaises(ValueError):
            validate_board((1, 2, 3))
        self.assertEqual(GOAL, validate_board(list(GOAL)))

    def test_solvability_parity(self):
        self.assertTrue(is_solvable(GOAL))
        self.assertFalse(is_solvable(make_unsolvable(GOAL)))
        self.assertFalse(is_solvable((2, 1, 3, 4, 5, 6, 7, 8, 0)))
        for seed in range(20):
            s = scramble(15, seed)
            self.assertTrue(is_solvable(s))
            self.assertFalse(is_solvable(make_unsolvable(s)))

    def test_scramble_is_deterministic(self):
        self.assertEqual(scramble(12, 7), scramble(12, 7))
        self.assertEqual(GOAL, scramble(0, 3))

    def test_format_board(self):
        text = format_board(GOAL)
        lines = text.splitlines()
        self.assertEqual(7, len(lines))
        self.assertEqual("| 1 | 2 | 3 |", lines[1])
        self.assertEqual("| 7 | 8 |   |", lines[5])


if __name__ == "__main__":
    unittest.main()
