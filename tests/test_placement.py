import math
import unittest

from game import (
    BLACK,
    WHITE,
    IndexOutOfBoundsError,
    InvalidPlayerError,
    InvalidProbabilityError,
    OccupiedCellError,
    Pending,
    create_empty_board,
    place_stone,
)


class TestStonePlacement(unittest.TestCase):
    def test_given_empty_cell_when_placing_then_new_board_with_pending_stone(self):
        board = create_empty_board(7)
        updated = place_stone(board, 10, BLACK, 0.9)
        self.assertIsNot(updated, board)
        self.assertEqual(updated[10], Pending(BLACK, 0.9))
        self.assertIsNone(board[10])
        self.assertEqual(len(updated), len(board))
        for i, cell in enumerate(board):
            if i != 10:
                self.assertIs(updated[i], cell)

    def test_given_existing_stones_when_placing_then_other_cells_preserved_by_identity(self):
        board = place_stone(create_empty_board(5), 0, WHITE, 0.1)
        board2 = place_stone(board, 1, BLACK, 0.7)
        self.assertIs(board2[0], board[0])
        self.assertEqual(board[1], None)

    def test_given_bounds_when_placing_then_edge_probabilities_accepted(self):
        board = create_empty_board(5)
        self.assertEqual(place_stone(board, 0, BLACK, 0)[0], Pending(BLACK, 0.0))
        self.assertEqual(place_stone(board, 24, WHITE, 1)[24], Pending(WHITE, 1.0))

    def test_given_bad_probability_when_placing_then_invalid_probability_error(self):
        board = create_empty_board(7)
        for bad in (1.5, -0.1, math.nan, "0.5", None, True):
            with self.assertRaises(InvalidProbabilityError):
                place_stone(board, 3, BLACK, bad)

    def test_given_bad_index_when_placing_then_index_out_of_bounds(self):
        board = create_empty_board(7)
        for bad in (-1, 49, 100, 2.0, None):
            with self.assertRaises(IndexOutOfBoundsError):
                place_stone(board, bad, BLACK, 0.5)

    def test_given_occupied_cell_when_placing_then_occupied_cell_error(self):
        board = place_stone(create_empty_board(7), 5, BLACK, 0.9)
        with self.assertRaises(OccupiedCellError):
            place_stone(board, 5, WHITE, 0.1)
        resolved = list(board)
        resolved[6] = WHITE
        with self.assertRaises(OccupiedCellError):
            place_stone(tuple(resolved), 6, BLACK, 0.9)
        self.assertEqual(board[5], Pending(BLACK, 0.9))

    def test_given_unknown_player_when_placing_then_invalid_player_error(self):
        with self.assertRaises(InvalidPlayerError):
            place_stone(create_empty_board(5), 0, "red", 0.5)


if __name__ == '__main__':
    unittest.main(verbosity=2)
