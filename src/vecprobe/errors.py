"""Error kinds raised by vecprobe.

Each error also derives from the closest builtin exception, so callers that
already handle ``FileNotFoundError``, ``ValueError`` or ``KeyError`` keep
working.
"""
from __future__ import annotations

from typing import Iterable, Optional

__all__ = [
    "VecprobeError",
    "UsageError",
    "SourceNotFoundError",
    "InputNotFoundError",
    "VectorParseError",
    "CacheMissError",
    "CorruptCacheError",
    "WordNotFoundError",
    "AllWordsMissingError",
]


class VecprobeError(Exception):
    """Base class for all vecprobe errors."""


class UsageError(VecprobeError, ValueError):
    """Invalid or missing command-line arguments."""


class SourceNotFoundError(VecprobeError, FileNotFoundError):
    """The text embedding file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'The vector file "{path}" was not found.')

    def __str__(self):
        return self.args[0]


class InputNotFoundError(VecprobeError, FileNotFoundError):
    """The query word list does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'Input file "{path}" doesn\'t exist.')

    def __str__(self):
        return self.args[0]


class VectorParseError(VecprobeError, ValueError):
    """A malformed header or vector line in the text source."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class CacheMissError(VecprobeError, FileNotFoundError):
    """No cache file exists for the requested capacity."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'Cache file "{path}" not found.')

    def __str__(self):
        return self.args[0]


class CorruptCacheError(VecprobeError, ValueError):
    """A cache file exists but cannot be decoded."""

    def __init__(self, path, reason=""):
        self.path = path
        message = f'Cache file "{path}" is corrupt'
        if reason:
            message += f": {reason}"
        super().__init__(message)


class WordNotFoundError(VecprobeError, KeyError):
    """One or more query words are not in the table."""

    def __init__(self, words: Iterable[str]):
        self.words = list(words)
        quoted = ", ".join(f"'{w}'" for w in self.words)
        super().__init__(f"Word(s) not in the vector table: {quoted}")

    def __str__(self):
        # KeyError would repr() the message
        return self.args[0]


class AllWordsMissingError(VecprobeError, ValueError):
    """None of the words of a set query are in the table."""

    def __init__(self, words: Iterable[str]):
        self.words = list(words)
        super().__init__("None of the words was found in the vector table.")
