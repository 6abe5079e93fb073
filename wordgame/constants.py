# wordgame/constants.py
from typing import Dict, Final, Set, Tuple

# Board Configuration
BOARD_SIZE: Final = 15
CENTER_SQUARE: Final = (7, 7)
RACK_SIZE: Final = 7
MIN_WORD_LENGTH: Final = 2
BINGO_BONUS: Final = 50
MIN_PLAYERS: Final = 2
MAX_PLAYERS: Final = 4
TOTAL_TILES: Final = 100

BLANK: Final = '?'

# Tile Distribution and Points
TILE_DISTRIBUTION: Final[Dict[str, Dict[str, int]]] = {
    'A': {'count': 9, 'points': 1},
    'B': {'count': 2, 'points': 3},
    'C': {'count': 2, 'points': 3},
    'D': {'count': 4, 'points': 2},
    'E': {'count': 12, 'points': 1},
    'F': {'count': 2, 'points': 4},
    'G': {'count': 3, 'points': 2},
    'H': {'count': 2, 'points': 4},
    'I': {'count': 9, 'points': 1},
    'J': {'count': 1, 'points': 8},
    'K': {'count': 1, 'points': 5},
    'L': {'count': 4, 'points': 1},
    'M': {'count': 2, 'points': 3},
    'N': {'count': 6, 'points': 1},
    'O': {'count': 8, 'points': 1},
    'P': {'count': 2, 'points': 3},
    'Q': {'count': 1, 'points': 10},
    'R': {'count': 6, 'points': 1},
    'S': {'count': 4, 'points': 1},
    'T': {'count': 6, 'points': 1},
    'U': {'count': 4, 'points': 1},
    'V': {'count': 2, 'points': 4},
    'W': {'count': 2, 'points': 4},
    'X': {'count': 1, 'points': 8},
    'Y': {'count': 2, 'points': 4},
    'Z': {'count': 1, 'points': 10},
    BLANK: {'count': 2, 'points': 0}  # Blank tiles
}

LETTER_VALUES: Final[Dict[str, int]] = {
    letter: data['points'] for letter, data in TILE_DISTRIBUTION.items() if letter != BLANK
}

# Premium Square Positions (the center square is kept out of DOUBLE_WORD)
PREMIUM_SQUARES: Final[Dict[str, Set[Tuple[int, int]]]] = {
    'TRIPLE_WORD': {
        (0, 0), (0, 7), (0, 14),
        (7, 0), (7, 14),
        (14, 0), (14, 7), (14, 14)
    },
    'DOUBLE_WORD': {
        (1, 1), (1, 13), (2, 2), (2, 12),
        (3, 3), (3, 11), (4, 4), (4, 10),
        (10, 4), (10, 10), (11, 3), (11, 11),
        (12, 2), (12, 12), (13, 1), (13, 13)
    },
    'TRIPLE_LETTER': {
        (1, 5), (1, 9), (5, 1), (5, 5),
        (5, 9), (5, 13), (9, 1), (9, 5),
        (9, 9), (9, 13), (13, 5), (13, 9)
    },
    'DOUBLE_LETTER': {
        (0, 3), (0, 11), (2, 6), (2, 8),
        (3, 0), (3, 7), (3, 14), (6, 2),
        (6, 6), (6, 8), (6, 12), (7, 3),
        (7, 11), (8, 2), (8, 6), (8, 8),
        (8, 12), (11, 0), (11, 7), (11, 14),
        (12, 6), (12, 8), (14, 3), (14, 11)
    }
}

# Error Messages
ERROR_MESSAGES: Final[Dict[str, str]] = {
    'NO_TILES': "no tiles played",
    'NOT_A_LINE': "tiles must form a single line",
    'GAP': "gap in placement",
    'NO_CENTER': "first word must cover center",
    'NO_CONNECTION': "play must connect to existing tiles",
    'INVALID_WORD': "'{word}' is not in the dictionary",
    'GAME_OVER': "The game is over",
    'NOT_AWAITING_READY': "Player is already playing",
    'NOT_PLACING': "Press ready before playing",
    'EXCHANGE_MODE': "Cannot place tiles while exchanging",
    'NOT_EXCHANGE_MODE': "Enter exchange mode to select tiles",
    'BAD_RACK_INDEX': "No tile at rack position {index}",
    'NO_SELECTION': "Select a square first",
    'OUT_OF_BOUNDS': "Square ({row}, {col}) is outside the board",
    'OCCUPIED': "Square ({row}, {col}) already holds a committed tile",
    'BLANK_PENDING': "Choose a letter for the blank tile first",
    'UNDESIGNATED_BLANK': "Blank tile on square ({row}, {col}) has no letter",
    'DUPLICATE': "More than one tile on square ({row}, {col})",
    'NO_BLANK_REQUEST': "No blank tile is waiting for a letter",
    'NOT_BLANK': "Rack tile {index} is not a blank",
    'BAD_LETTER': "'{letter}' is not a letter from A to Z",
    'NO_SUCH_LETTER': "No '{letter}' or blank tile in your rack",
    'NOTHING_TO_EXCHANGE': "Select tiles to exchange",
}

ALPHABET: Final = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
