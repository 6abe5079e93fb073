"""Word dictionary: uppercase word -> positive score multiplier.

A word missing from the dictionary is not playable.
"""

import collections.abc
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Mapping, Optional, Union

from .errors import DictionaryFormatError

logger = logging.getLogger(__name__)


class WordDictionary(collections.abc.Mapping):
    """Case-insensitive read-only mapping of words to multipliers"""

    def __init__(self, entries: Mapping[str, int]):
        words: Dict[str, int] = {}
        for word, multiplier in entries.items():
            word = word.strip().upper()
            if not word:
                raise DictionaryFormatError("word cannot be empty")
            if not isinstance(multiplier, int) or isinstance(multiplier, bool) or multiplier < 1:
                raise DictionaryFormatError(f"multiplier for {word} must be a positive integer, got {multiplier!r}")
            words[word] = multiplier
        self._words = words

    def __getitem__(self, word: str) -> int:
        return self._words[word.upper()]

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and word.upper() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self):
        return f"WordDictionary({len(self._words)} words)"

    def is_valid(self, word: str) -> bool:
        return word in self

    def multiplier(self, word: str, default: Optional[int] = None) -> Optional[int]:
        return self._words.get(word.upper(), default)


def parse_word_list(lines: Iterable[str]) -> WordDictionary:
    """Parse `WORD,INTEGER` rows. Blank lines are skipped; anything else malformed raises."""
    entries: Dict[str, int] = {}
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        parts = line.split(',')
        if len(parts) != 2:
            raise DictionaryFormatError('expected "word,score"', line_number)

        word, score_str = parts[0].strip(), parts[1].strip()
        if not word:
            raise DictionaryFormatError("word cannot be empty", line_number)

        try:
            score = int(score_str)
        except ValueError:
            raise DictionaryFormatError(f'"{score_str}" is not a valid number', line_number) from None
        if score < 1:
            raise DictionaryFormatError(f"score for {word} must be positive, got {score}", line_number)

        entries[word.upper()] = score

    if not entries:
        raise DictionaryFormatError("word list contains no entries")

    return WordDictionary(entries)


def load_word_list(path: Union[str, Path]) -> WordDictionary:
    """Load a dictionary from a `WORD,INTEGER` text file"""
    path = Path(path)
    with open(path, encoding='utf-8') as f:
        dictionary = parse_word_list(f)
    logger.info(f"Loaded {len(dictionary)} words from {path}")
    return dictionary


def as_dictionary(words: Union[WordDictionary, Mapping[str, int]]) -> WordDictionary:
    if isinstance(words, WordDictionary):
        return words
    return WordDictionary(words)
