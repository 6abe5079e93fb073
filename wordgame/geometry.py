"""Board geometry: premium squares and word extraction along an axis."""

from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from .board import Board, in_bounds
from .constants import CENTER_SQUARE, MIN_WORD_LENGTH, PREMIUM_SQUARES
from .types import BonusKind, Direction

Position = Tuple[int, int]


@dataclass(frozen=True)
class WordSpan:
    """A run of occupied cells along one direction"""
    direction: Direction
    start: Position
    cells: Tuple[Position, ...]
    text: str

    def __len__(self):
        return len(self.cells)


def bonus_at(row: int, col: int) -> BonusKind:
    """Premium square at a cell. The center is its own kind, never DOUBLE_WORD."""
    pos = (row, col)
    if pos == CENTER_SQUARE:
        return BonusKind.CENTER
    if pos in PREMIUM_SQUARES['TRIPLE_WORD']:
        return BonusKind.TRIPLE_WORD
    if pos in PREMIUM_SQUARES['DOUBLE_WORD']:
        return BonusKind.DOUBLE_WORD
    if pos in PREMIUM_SQUARES['TRIPLE_LETTER']:
        return BonusKind.TRIPLE_LETTER
    if pos in PREMIUM_SQUARES['DOUBLE_LETTER']:
        return BonusKind.DOUBLE_LETTER
    return BonusKind.NONE


def word_start(board: Board, row: int, col: int, direction: Direction) -> Position:
    """Walk backwards from (row, col) while the previous cell is occupied"""
    dr, dc = direction.value
    while board.is_occupied(row - dr, col - dc):
        row -= dr
        col -= dc
    return (row, col)


def word_cells(board: Board, row: int, col: int, direction: Direction) -> Tuple[Position, ...]:
    """All cells of the word through (row, col), from its start to the first gap or edge"""
    dr, dc = direction.value
    row, col = word_start(board, row, col, direction)
    cells = []
    while board.is_occupied(row, col):
        cells.append((row, col))
        row += dr
        col += dc
    return tuple(cells)


def extract_word(board: Board, row: int, col: int, direction: Direction) -> str:
    """Extract complete word in given direction. Length 1 means no word."""
    return ''.join(board[pos].letter for pos in word_cells(board, row, col, direction))


def touched_words(board: Board, positions: Iterable[Position]) -> List[WordSpan]:
    """Unique words of two or more letters running through any of `positions`.

    `board` must already hold the tiles at `positions`. Words come out in
    position order, across before down, each (direction, start) only once.
    """
    seen: Set[Tuple[Direction, Position]] = set()
    words = []
    for row, col in positions:
        for direction in (Direction.ACROSS, Direction.DOWN):
            start = word_start(board, row, col, direction)
            if (direction, start) in seen:
                continue
            seen.add((direction, start))
            cells = word_cells(board, row, col, direction)
            if len(cells) < MIN_WORD_LENGTH:
                continue
            text = ''.join(board[pos].letter for pos in cells)
            words.append(WordSpan(direction=direction, start=start, cells=cells, text=text))
    return words


def neighbours(row: int, col: int) -> List[Position]:
    """Orthogonally adjacent cells inside the board"""
    return [
        (r, c) for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
        if in_bounds(r, c)
    ]
