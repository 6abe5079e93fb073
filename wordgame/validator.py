# wordgame/validator.py

from typing import List, Mapping, Optional, Sequence, Tuple

from .board import Board, in_bounds
from .constants import CENTER_SQUARE, ERROR_MESSAGES
from .geometry import neighbours, touched_words
from .types import Direction, PendingPlacement, ValidationResult


class MoveValidator:
    """Validates all aspects of placement legality.

    Rules run in a fixed order and the first failure wins:
    non-empty, every tile on a free square of the board with a letter,
    single line, no gaps, center on the first move, connection on later
    moves, every touched word in the dictionary.
    """

    def __init__(self, dictionary: Mapping[str, int]):
        self.dictionary = dictionary

    def validate(self, board: Board, placements: Sequence[PendingPlacement],
                 is_first_move: bool) -> ValidationResult:
        """Complete placement validation. Never mutates `board`."""
        if not placements:
            return ValidationResult(False, ERROR_MESSAGES['NO_TILES'])

        reason = self._check_squares(board, placements)
        if reason:
            return ValidationResult(False, reason)

        direction = self._line_direction(placements)
        if direction is None:
            return ValidationResult(False, ERROR_MESSAGES['NOT_A_LINE'])

        if not self._is_continuous(board, placements, direction):
            return ValidationResult(False, ERROR_MESSAGES['GAP'])

        positions = [p.position for p in placements]
        working = board.with_placements(placements, owner=-1)
        words = touched_words(working, positions)

        if is_first_move:
            if CENTER_SQUARE not in positions:
                return ValidationResult(False, ERROR_MESSAGES['NO_CENTER'])
        elif not self._connects(board, positions, words):
            return ValidationResult(False, ERROR_MESSAGES['NO_CONNECTION'])

        for word in words:
            if word.text.upper() not in self.dictionary:
                return ValidationResult(False, ERROR_MESSAGES['INVALID_WORD'].format(word=word.text))

        return ValidationResult(True, None)

    def _check_squares(self, board: Board, placements: Sequence[PendingPlacement]) -> Optional[str]:
        """Reason the first bad placement cannot go down, or None"""
        seen = set()
        for placement in placements:
            row, col = placement.position
            if not in_bounds(row, col):
                return ERROR_MESSAGES['OUT_OF_BOUNDS'].format(row=row, col=col)
            if placement.tile.letter is None:
                return ERROR_MESSAGES['UNDESIGNATED_BLANK'].format(row=row, col=col)
            if board.is_occupied(row, col):
                return ERROR_MESSAGES['OCCUPIED'].format(row=row, col=col)
            if (row, col) in seen:
                return ERROR_MESSAGES['DUPLICATE'].format(row=row, col=col)
            seen.add((row, col))
        return None

    def _line_direction(self, placements: Sequence[PendingPlacement]) -> Optional[Direction]:
        """Shared axis of the placements; a single tile counts as across"""
        rows = {p.row for p in placements}
        cols = {p.col for p in placements}
        if len(rows) == 1:
            return Direction.ACROSS
        if len(cols) == 1:
            return Direction.DOWN
        return None

    def _is_continuous(self, board: Board, placements: Sequence[PendingPlacement],
                       direction: Direction) -> bool:
        """Every cell between consecutive placed tiles must hold a committed tile"""
        axis = 1 if direction == Direction.ACROSS else 0
        ordered = sorted(p.position for p in placements)
        for current, following in zip(ordered, ordered[1:]):
            for step in range(current[axis] + 1, following[axis]):
                gap = (current[0], step) if axis == 1 else (step, current[1])
                if not board.is_occupied(*gap):
                    return False
        return True

    def _connects(self, board: Board, positions: List[Tuple[int, int]], words) -> bool:
        """Adjacent to a committed tile, or sharing a word with one"""
        for row, col in positions:
            if any(board.is_occupied(r, c) for r, c in neighbours(row, col)):
                return True
        return any(board.is_occupied(*cell) for word in words for cell in word.cells)


def validate_move(board: Board, placements: Sequence[PendingPlacement],
                  dictionary: Mapping[str, int], is_first_move: bool) -> ValidationResult:
    return MoveValidator(dictionary).validate(board, placements, is_first_move)
