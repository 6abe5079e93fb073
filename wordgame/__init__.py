"""
Word game engine - tile placement, scoring and turn handling for 2-4 players
"""

from .bag import TileBag, RandomSource
from .board import Board
from .config import GameConfig
from .dictionary import WordDictionary, load_word_list, parse_word_list
from .errors import WordGameError, DictionaryFormatError, TileCountError
from .geometry import bonus_at, extract_word, touched_words
from .scoring import Scorer, ScoreBreakdown, score_move
from .session import GameSession
from .turns import ActionResult
from .types import BonusKind, Direction, Phase, Tile, PlacedTile, PendingPlacement, Player, PlayPreview
from .validator import MoveValidator, validate_move

__all__ = [
    'TileBag', 'RandomSource', 'Board', 'GameConfig',
    'WordDictionary', 'load_word_list', 'parse_word_list',
    'WordGameError', 'DictionaryFormatError', 'TileCountError',
    'bonus_at', 'extract_word', 'touched_words',
    'Scorer', 'ScoreBreakdown', 'score_move',
    'GameSession', 'ActionResult',
    'BonusKind', 'Direction', 'Phase', 'Tile', 'PlacedTile', 'PendingPlacement', 'Player', 'PlayPreview',
    'MoveValidator', 'validate_move',
]
