# wordgame/bag.py

import random
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, Tuple

from .constants import BLANK, TILE_DISTRIBUTION
from .types import Tile


class RandomSource(Protocol):
    """Anything with a `randrange(stop)`; `random.Random` qualifies"""

    def randrange(self, stop: int) -> int:
        ...


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    return random.Random(seed)


def shuffle_tiles(tiles: Sequence[Tile], rng: RandomSource) -> Tuple[Tile, ...]:
    """Fisher-Yates shuffle driven by `rng`; returns a new tuple"""
    shuffled = list(tiles)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)


def initial_tiles() -> Tuple[Tile, ...]:
    """The full unshuffled tile set: 98 letters and 2 blanks"""
    tiles = []
    for letter, data in TILE_DISTRIBUTION.items():
        for _ in range(data['count']):
            tiles.append(Tile.blank() if letter == BLANK else Tile.from_letter(letter))
    return tuple(tiles)


@dataclass(frozen=True)
class TileBag:
    """Manages the pool of undrawn tiles. Every operation returns a new bag."""
    tiles: Tuple[Tile, ...] = ()

    @classmethod
    def initial(cls, rng: RandomSource) -> 'TileBag':
        return cls(shuffle_tiles(initial_tiles(), rng))

    def __len__(self):
        return len(self.tiles)

    def draw(self, count: int) -> Tuple[Tuple[Tile, ...], 'TileBag']:
        """Draw up to `count` tiles from the front; fewer if the bag runs short"""
        count = max(0, min(count, len(self.tiles)))
        return self.tiles[:count], TileBag(self.tiles[count:])

    def exchange(self, tiles: Iterable[Tile], rng: RandomSource) -> 'TileBag':
        """Return tiles to the bag and reshuffle the whole bag"""
        returned = tuple(tile.as_rack_tile() for tile in tiles)
        return TileBag(shuffle_tiles(self.tiles + returned, rng))

    def get_remaining_tiles(self) -> int:
        return len(self.tiles)
