"""Programming-error exceptions.

User actions never raise; they come back as rejected ActionResults.
These are for broken inputs handed to the engine by its caller.
"""

from typing import Optional


class WordGameError(Exception):
    """Base class for engine errors"""


class DictionaryFormatError(WordGameError, ValueError):
    """A word list row could not be parsed"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class TileCountError(WordGameError, RuntimeError):
    """Tiles were created or lost: bag, racks and board no longer add up"""
