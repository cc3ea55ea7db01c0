"""Query word input and ranked result output files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .errors import InputNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "TRIM_CHARS",
    "read_input_words",
    "next_output_path",
    "format_result",
    "write_results",
]

TRIM_CHARS = ";, "


def read_input_words(path: str | Path) -> List[str]:
    """
    Read query words, one per line.

    Each line is stripped of surrounding ``;``, ``,`` and spaces (plus the
    line ending).

    Args:
        path: Word list file (no header line)

    Returns:
        List of words, in file order

    Raises:
        InputNotFoundError: If ``path`` does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise InputNotFoundError(path)

    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        words = [line.rstrip("\r\n").strip(TRIM_CHARS) for line in f]

    logger.debug(f"Read {len(words)} words from {path}")
    return words


def next_output_path(directory: str | Path = ".", stem: str = "output", suffix: str = ".csv") -> Path:
    """
    First non-existing ``output_<i>.csv`` in ``directory``, counting from 0.

    Example:
        >>> next_output_path("/tmp/empty_dir")
        PosixPath('/tmp/empty_dir/output_0.csv')
    """
    directory = Path(directory)
    i = 0
    while True:
        path = directory / f"{stem}_{i}{suffix}"
        if not path.exists():
            return path
        i += 1


def format_result(word: str, distance: float) -> str:
    # repr() is locale-independent and round-trips the float
    return f"{word}, {float(distance)!r}"


def write_results(results: Iterable, path: str | Path) -> int:
    """
    Write ``word, distance`` lines.

    Args:
        results: Iterable of (word, distance) pairs
        path: Output file

    Returns:
        Number of lines written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for word, distance in results:
            f.write(format_result(word, distance) + "\n")
            count += 1

    logger.debug(f"Wrote {count} results to {path}")
    return count
