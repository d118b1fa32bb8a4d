import random
import unittest

from game import (
    BLACK,
    BOTH,
    WHITE,
    CollapseResult,
    Pending,
    collapse_board,
    create_empty_board,
    determine_winner,
    is_resolved,
    place_stone,
)


def constant_rng(value):
    return lambda: value


class CountingRng:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


class TestCollapseEngine(unittest.TestCase):
    def test_given_row_of_likely_black_stones_when_collapsing_with_low_draws_then_black_wins(self):
        size = 7
        board = create_empty_board(size)
        for i in range(21, 26):
            board = place_stone(board, i, BLACK, 0.9)
        result = collapse_board(board, size, constant_rng(0.02))
        self.assertIsInstance(result, CollapseResult)
        self.assertEqual(result.winner, BLACK)
        self.assertEqual(list(result.collapsed[21:26]), [BLACK] * 5)

    def test_given_draw_equal_to_probability_then_white(self):
        board = place_stone(create_empty_board(5), 0, BLACK, 0.5)
        collapsed, _ = collapse_board(board, 5, constant_rng(0.5))
        self.assertEqual(collapsed[0], WHITE)
        collapsed, _ = collapse_board(board, 5, constant_rng(0.4999))
        self.assertEqual(collapsed[0], BLACK)

    def test_given_out_of_range_probability_then_clamped(self):
        board = list(create_empty_board(5))
        board[0] = Pending(BLACK, 1.5)
        board[1] = Pending(WHITE, -0.5)
        collapsed, _ = collapse_board(tuple(board), 5, constant_rng(0.999))
        self.assertEqual(collapsed[0], BLACK)
        collapsed, _ = collapse_board(tuple(board), 5, constant_rng(0.0))
        self.assertEqual(collapsed[1], WHITE)

    def test_given_board_when_collapsing_then_input_untouched_and_one_draw_per_pending(self):
        board = create_empty_board(6)
        board = place_stone(board, 3, BLACK, 0.9)
        board = place_stone(board, 17, WHITE, 0.1)
        resolved = list(board)
        resolved[20] = WHITE
        board = tuple(resolved)
        rng = CountingRng(0.5)
        collapsed, _ = collapse_board(board, 6, rng)
        self.assertEqual(rng.calls, 2)
        self.assertEqual(board[3], Pending(BLACK, 0.9))
        self.assertTrue(is_resolved(collapsed))
        self.assertEqual(collapsed[20], WHITE)
        self.assertIsNone(collapsed[0])

    def test_given_seeded_source_when_collapsing_repeatedly_then_identical_results(self):
        board = create_empty_board(9)
        for i in range(0, 81, 2):
            board = place_stone(board, i, BLACK if i % 4 == 0 else WHITE, 0.6)
        first = collapse_board(board, 9, random.Random(42).random)
        second = collapse_board(board, 9, random.Random(42).random)
        self.assertEqual(first, second)

    def test_given_board_without_pending_when_collapsing_then_unchanged(self):
        cells = list(create_empty_board(7))
        for x in range(5):
            cells[x] = BLACK
            cells[42 + x] = WHITE
        board = tuple(cells)
        rng = CountingRng(0.0)
        collapsed, winner = collapse_board(board, 7, rng)
        self.assertEqual(collapsed, board)
        self.assertEqual(winner, determine_winner(board, 7))
        self.assertEqual(winner, BOTH)
        self.assertEqual(rng.calls, 0)

    def test_given_empty_board_when_collapsing_then_no_winner(self):
        collapsed, winner = collapse_board(create_empty_board(5), 5, constant_rng(0.1))
        self.assertEqual(collapsed, create_empty_board(5))
        self.assertIsNone(winner)


if __name__ == '__main__':
    unittest.main(verbosity=2)
