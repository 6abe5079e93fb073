# wordgame/scoring.py

from dataclasses import dataclass, field
from typing import List, Mapping, Sequence

from .board import Board
from .constants import BINGO_BONUS, RACK_SIZE
from .geometry import WordSpan, bonus_at, touched_words
from .types import PendingPlacement


@dataclass(frozen=True)
class WordScore:
    word: str
    base_score: int       # letters x premium word multiplier
    multiplier: int       # dictionary weight
    score: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-word scores and bonus for one play"""
    words: List[WordScore] = field(default_factory=list)
    bingo_bonus: int = 0

    @property
    def total(self) -> int:
        return sum(w.score for w in self.words) + self.bingo_bonus

    @property
    def words_formed(self) -> List[str]:
        return [w.word for w in self.words]


class Scorer:
    """Scores a validated placement.

    New tiles take letter premiums and feed the word multiplier; tiles
    already on the board count at face value. Each word is then weighted
    by its dictionary multiplier.
    """

    def __init__(self, dictionary: Mapping[str, int], bingo_bonus: int = BINGO_BONUS,
                 rack_size: int = RACK_SIZE):
        self.dictionary = dictionary
        self.bingo_bonus = bingo_bonus
        self.rack_size = rack_size

    def score(self, board: Board, placements: Sequence[PendingPlacement]) -> int:
        return self.score_breakdown(board, placements).total

    def score_breakdown(self, board: Board, placements: Sequence[PendingPlacement]) -> ScoreBreakdown:
        if not placements:
            return ScoreBreakdown()

        working = board.with_placements(placements, owner=-1)
        new_positions = {p.position for p in placements}

        words = [
            self._score_word(working, span, new_positions)
            for span in touched_words(working, [p.position for p in placements])
        ]

        # Bingo: the whole rack went down in one play
        bingo = self.bingo_bonus if len(placements) >= self.rack_size else 0
        return ScoreBreakdown(words=words, bingo_bonus=bingo)

    def _score_word(self, working: Board, span: WordSpan, new_positions) -> WordScore:
        letter_total = 0
        word_multiplier = 1
        for row, col in span.cells:
            tile = working[row, col]
            if (row, col) in new_positions:
                bonus = bonus_at(row, col)
                letter_total += tile.points * bonus.letter_multiplier
                word_multiplier *= bonus.word_multiplier
            else:
                letter_total += tile.points

        base = letter_total * word_multiplier
        multiplier = self.dictionary.get(span.text.upper(), 1)
        return WordScore(word=span.text, base_score=base, multiplier=multiplier, score=base * multiplier)


def score_move(board: Board, placements: Sequence[PendingPlacement],
               dictionary: Mapping[str, int]) -> int:
    return Scorer(dictionary).score(board, placements)
