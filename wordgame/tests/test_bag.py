"""Unit tests for the tile bag"""

import random
import unittest
from collections import Counter

from ..bag import TileBag, initial_tiles, shuffle_tiles
from ..types import Tile
from .helpers import ZeroRandom


class TestShuffle(unittest.TestCase):
    def test_fisher_yates_order(self):
        tiles = [Tile.from_letter(letter) for letter in 'ABC']
        shuffled = shuffle_tiles(tiles, ZeroRandom())
        self.assertEqual(''.join(t.letter for t in shuffled), 'BCA')

    def test_same_seed_same_order(self):
        tiles = initial_tiles()
        self.assertEqual(shuffle_tiles(tiles, random.Random(42)), shuffle_tiles(tiles, random.Random(42)))

    def test_shuffle_keeps_every_tile(self):
        tiles = initial_tiles()
        self.assertEqual(Counter(shuffle_tiles(tiles, random.Random(3))), Counter(tiles))

    def test_input_untouched(self):
        tiles = [Tile.from_letter(letter) for letter in 'ABC']
        shuffle_tiles(tiles, ZeroRandom())
        self.assertEqual(''.join(t.letter for t in tiles), 'ABC')


class TestTileBag(unittest.TestCase):
    def setUp(self):
        self.bag = TileBag.initial(random.Random(0))

    def test_initial_distribution(self):
        self.assertEqual(len(self.bag), 100)
        counts = Counter('?' if t.is_blank else t.letter for t in self.bag.tiles)
        self.assertEqual(counts['?'], 2)
        self.assertEqual(counts['E'], 12)
        self.assertEqual(counts['Z'], 1)
        self.assertEqual(sum(t.points for t in self.bag.tiles), 187)

    def test_draw_from_front(self):
        drawn, bag = self.bag.draw(7)
        self.assertEqual(drawn, self.bag.tiles[:7])
        self.assertEqual(len(bag), 93)
        self.assertEqual(len(self.bag), 100)

    def test_draw_more_than_remaining(self):
        small = TileBag(tuple(Tile.from_letter(letter) for letter in 'XYZ'))
        drawn, bag = small.draw(7)
        self.assertEqual(len(drawn), 3)
        self.assertEqual(len(bag), 0)
        self.assertEqual(bag.get_remaining_tiles(), 0)

    def test_draw_from_empty_bag(self):
        drawn, bag = TileBag().draw(7)
        self.assertEqual(drawn, ())
        self.assertEqual(len(bag), 0)

    def test_exchange_returns_tiles(self):
        drawn, bag = self.bag.draw(3)
        bag = bag.exchange(drawn, random.Random(1))
        self.assertEqual(len(bag), 100)
        self.assertEqual(Counter(bag.tiles), Counter(self.bag.tiles))

    def test_exchange_strips_blank_letter(self):
        bag = TileBag().exchange([Tile.blank().designate('q')], ZeroRandom())
        self.assertEqual(bag.tiles, (Tile.blank(),))


if __name__ == '__main__':
    unittest.main()
