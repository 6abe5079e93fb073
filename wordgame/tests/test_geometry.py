"""Unit tests for the board grid and its geometry helpers"""

import unittest

import numpy as np

from ..board import Board, in_bounds
from ..geometry import bonus_at, extract_word, neighbours, touched_words, word_start
from ..types import BonusKind, Direction, PendingPlacement, PlacedTile, Tile
from .helpers import board_with, placements_for


class TestBoard(unittest.TestCase):
    def setUp(self):
        self.board = board_with((7, 6, Direction.ACROSS, 'CAT'))

    def test_empty_board(self):
        board = Board.empty()
        self.assertTrue(board.is_empty())
        self.assertEqual(board.tile_count(), 0)
        self.assertIsNone(board[7, 7])

    def test_with_placements_returns_new_board(self):
        empty = Board.empty()
        board = empty.with_placements([PendingPlacement(7, 7, Tile.from_letter('a'))], owner=1)
        self.assertTrue(empty.is_empty())
        self.assertEqual(board[7, 7], PlacedTile('A', 1, False, 1))

    def test_cells_are_read_only(self):
        with self.assertRaises(ValueError):
            self.board._cells[0, 0] = None

    def test_caller_array_stays_writable(self):
        cells = np.full((15, 15), None, dtype=object)
        board = Board(cells)
        cells[0, 0] = PlacedTile('A', 1, False, 0)
        self.assertTrue(cells.flags.writeable)
        self.assertIsNone(board[0, 0])

    def test_is_occupied_outside_board(self):
        self.assertTrue(self.board.is_occupied(7, 6))
        self.assertFalse(self.board.is_occupied(-1, 6))
        self.assertFalse(self.board.is_occupied(7, 15))

    def test_equality(self):
        self.assertEqual(self.board, board_with((7, 6, Direction.ACROSS, 'CAT')))
        self.assertNotEqual(self.board, Board.empty())

    def test_occupied_and_rows(self):
        cells = [(row, col, tile.letter) for row, col, tile in self.board.occupied()]
        self.assertEqual(cells, [(7, 6, 'C'), (7, 7, 'A'), (7, 8, 'T')])
        self.assertEqual(self.board.to_rows()[7], '......CAT......')

    def test_undesignated_blank_cannot_be_placed(self):
        with self.assertRaises(ValueError):
            Board.empty().with_placements([PendingPlacement(7, 7, Tile.blank())], owner=0)

    def test_in_bounds(self):
        self.assertTrue(in_bounds(0, 14))
        self.assertFalse(in_bounds(15, 0))


class TestGeometry(unittest.TestCase):
    def setUp(self):
        self.board = board_with((7, 6, Direction.ACROSS, 'CAT'))

    def test_premium_squares(self):
        self.assertEqual(bonus_at(0, 0), BonusKind.TRIPLE_WORD)
        self.assertEqual(bonus_at(1, 1), BonusKind.DOUBLE_WORD)
        self.assertEqual(bonus_at(1, 5), BonusKind.TRIPLE_LETTER)
        self.assertEqual(bonus_at(0, 3), BonusKind.DOUBLE_LETTER)
        self.assertEqual(bonus_at(7, 6), BonusKind.NONE)

    def test_center_has_no_multiplier(self):
        center = bonus_at(7, 7)
        self.assertEqual(center, BonusKind.CENTER)
        self.assertEqual(center.letter_multiplier, 1)
        self.assertEqual(center.word_multiplier, 1)

    def test_bonus_kinds_are_distinct(self):
        self.assertEqual(len(set(BonusKind)), 6)
        self.assertIsNot(BonusKind.CENTER, BonusKind.NONE)
        multipliers = {kind: (kind.letter_multiplier, kind.word_multiplier) for kind in BonusKind}
        self.assertEqual(multipliers[BonusKind.TRIPLE_LETTER], (3, 1))
        self.assertEqual(multipliers[BonusKind.DOUBLE_WORD], (1, 2))
        self.assertEqual(bonus_at(7, 7).label, '★')

    def test_extract_word_from_any_cell(self):
        self.assertEqual(extract_word(self.board, 7, 6, Direction.ACROSS), 'CAT')
        self.assertEqual(extract_word(self.board, 7, 8, Direction.ACROSS), 'CAT')
        self.assertEqual(extract_word(self.board, 7, 7, Direction.DOWN), 'A')

    def test_word_start(self):
        self.assertEqual(word_start(self.board, 7, 8, Direction.ACROSS), (7, 6))
        self.assertEqual(word_start(self.board, 7, 8, Direction.DOWN), (7, 8))

    def test_touched_words_are_unique(self):
        words = touched_words(self.board, [(7, 6), (7, 7), (7, 8)])
        self.assertEqual(len(words), 1)
        self.assertEqual(words[0].text, 'CAT')
        self.assertEqual(words[0].start, (7, 6))
        self.assertEqual(words[0].direction, Direction.ACROSS)

    def test_touched_words_include_cross_words(self):
        # AT tucked under the T of CAT
        board = self.board.with_placements(placements_for(8, 8, Direction.ACROSS, 'AT'), owner=1)
        words = touched_words(board, [(8, 8), (8, 9)])
        self.assertEqual([(w.direction, w.text) for w in words],
                         [(Direction.ACROSS, 'AT'), (Direction.DOWN, 'TA')])

    def test_single_letters_are_not_words(self):
        board = Board.empty().with_placements([PendingPlacement(7, 7, Tile.from_letter('A'))], owner=0)
        self.assertEqual(touched_words(board, [(7, 7)]), [])

    def test_neighbours_at_corner(self):
        self.assertEqual(sorted(neighbours(0, 0)), [(0, 1), (1, 0)])
        self.assertEqual(len(neighbours(7, 7)), 4)


if __name__ == '__main__':
    unittest.main()
