"""Configuration and path utilities for vector loading and queries."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "DEFAULT_SOURCE",
    "DEFAULT_CAPACITY",
    "CACHE_CEILING",
    "DEFAULT_TOP",
    "CACHE_PREFIX",
    "CACHE_SUFFIX",
    "StoreConfig",
    "QueryConfig",
    "parse_capacity",
    "build_cache_path",
]

DEFAULT_SOURCE = "wiki-news-300d-1M.vec"
DEFAULT_CAPACITY = 50_000
CACHE_CEILING = 500_000
DEFAULT_TOP = 100

CACHE_PREFIX = "serialized_"
CACHE_SUFFIX = ".bin"


@dataclass
class StoreConfig:
    """Configuration for loading the vector table.

    Attributes:
        source_path: Text embedding file (fastText/word2vec ``.vec`` format)
        cache_dir: Directory holding ``serialized_<capacity>.bin`` caches
        capacity: Number of vectors to read from the top of the source file;
            0 reads all of them
        cache_ceiling: Capacities at or above this bypass the cache
        show_progress: Show a progress bar while parsing the source
    """
    source_path: Path = field(default_factory=lambda: Path(DEFAULT_SOURCE))
    cache_dir: Path = field(default_factory=Path)
    capacity: int = DEFAULT_CAPACITY
    cache_ceiling: int = CACHE_CEILING
    show_progress: bool = True

    def __post_init__(self):
        self.source_path = Path(self.source_path)
        self.cache_dir = Path(self.cache_dir)
        if self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")


@dataclass
class QueryConfig:
    """Configuration for a query run.

    Attributes:
        top: Number of ranked results written to the output file
        average: Use the mean of the input vectors instead of their sum
        output_dir: Directory receiving ``output_<n>.csv`` files
    """
    top: int = DEFAULT_TOP
    average: bool = False
    output_dir: Path = field(default_factory=Path)

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)


def parse_capacity(text, default: int = DEFAULT_CAPACITY) -> int:
    """
    Parse a vector-count argument.

    Non-numeric or negative values are ignored and the default is kept.

    Args:
        text: Raw argument value (may be None)
        default: Value returned when ``text`` is not a valid count

    Returns:
        int: The capacity (0 means all vectors)

    Example:
        >>> parse_capacity("100000")
        100000
        >>> parse_capacity("lots")
        50000
    """
    if text is None:
        return default
    text = str(text).strip()
    if not (text.isascii() and text.isdigit()):
        return default
    return int(text)


def build_cache_path(cache_dir: str | Path, capacity: int) -> Path:
    """Build the cache file path for a capacity, e.g. ``serialized_50000.bin``."""
    return Path(cache_dir) / f"{CACHE_PREFIX}{capacity}{CACHE_SUFFIX}"
