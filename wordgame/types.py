"""Type definitions for the word game"""

from enum import Enum, auto
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional, Tuple

from .constants import LETTER_VALUES


class Direction(Enum):
    """Play directions on the board"""
    ACROSS = (0, 1)
    DOWN = (1, 0)

    def perpendicular(self) -> 'Direction':
        """Get perpendicular direction"""
        return Direction.DOWN if self == Direction.ACROSS else Direction.ACROSS


class BonusKind(Enum):
    """Premium square kinds"""
    NONE = auto()
    DOUBLE_LETTER = auto()
    TRIPLE_LETTER = auto()
    DOUBLE_WORD = auto()
    TRIPLE_WORD = auto()
    CENTER = auto()  # Star square, no multiplier

    @property
    def letter_multiplier(self) -> int:
        return BONUS_MULTIPLIERS[self][0]

    @property
    def word_multiplier(self) -> int:
        return BONUS_MULTIPLIERS[self][1]

    @property
    def label(self) -> str:
        return BONUS_LABELS[self]


# (letter_multiplier, word_multiplier)
BONUS_MULTIPLIERS = {
    BonusKind.NONE: (1, 1),
    BonusKind.DOUBLE_LETTER: (2, 1),
    BonusKind.TRIPLE_LETTER: (3, 1),
    BonusKind.DOUBLE_WORD: (1, 2),
    BonusKind.TRIPLE_WORD: (1, 3),
    BonusKind.CENTER: (1, 1),
}

BONUS_LABELS = {
    BonusKind.NONE: '',
    BonusKind.DOUBLE_LETTER: 'DL',
    BonusKind.TRIPLE_LETTER: 'TL',
    BonusKind.DOUBLE_WORD: 'DW',
    BonusKind.TRIPLE_WORD: 'TW',
    BonusKind.CENTER: '★',
}


class Phase(Enum):
    """Turn states"""
    AWAITING_READY = auto()
    PLACING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Tile:
    """Represents a single letter tile. A blank has no letter until designated."""
    letter: Optional[str]
    points: int
    is_blank: bool = False

    @classmethod
    def from_letter(cls, letter: str) -> 'Tile':
        """Create a tile from a letter"""
        letter = letter.upper()
        return cls(letter=letter, points=LETTER_VALUES[letter])

    @classmethod
    def blank(cls) -> 'Tile':
        return cls(letter=None, points=0, is_blank=True)

    @property
    def is_designated(self) -> bool:
        return self.letter is not None

    def designate(self, letter: str) -> 'Tile':
        """Assign a letter to a blank tile"""
        if not self.is_blank:
            raise ValueError("Cannot assign letter to non-blank tile")
        return replace(self, letter=letter.upper(), points=0)

    def as_rack_tile(self) -> 'Tile':
        """The tile as it goes back to a rack: blanks lose their designation"""
        return Tile.blank() if self.is_blank else self


@dataclass(frozen=True)
class PlacedTile:
    """A committed tile on the board"""
    letter: str
    points: int
    is_blank: bool
    owner: int

    @classmethod
    def from_tile(cls, tile: Tile, owner: int) -> 'PlacedTile':
        if tile.letter is None:
            raise ValueError("Cannot place an undesignated blank")
        return cls(letter=tile.letter, points=tile.points, is_blank=tile.is_blank, owner=owner)


@dataclass(frozen=True)
class PendingPlacement:
    """A tile moved from the rack onto the board this turn, not yet committed"""
    row: int
    col: int
    tile: Tile

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @property
    def is_blank(self) -> bool:
        return self.tile.is_blank


@dataclass(frozen=True)
class Player:
    """Tracks player state"""
    name: str
    score: int = 0
    rack: Tuple[Tile, ...] = ()

    @property
    def rack_points(self) -> int:
        return sum(tile.points for tile in self.rack)


class ValidationResult(NamedTuple):
    valid: bool
    reason: Optional[str] = None


class PlayPreview(NamedTuple):
    """Provisional outcome of the pending play, shown before submitting"""
    valid: bool
    reason: Optional[str]
    score: int
