"""Text source reading for fastText/word2vec ``.vec`` embedding files."""
from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path
from typing import Iterable, Tuple

import numpy as np
from tqdm import tqdm

from ..errors import SourceNotFoundError, VectorParseError
from ..table import VectorTable

logger = logging.getLogger(__name__)

INITIAL_ROWS = 65_536

__all__ = [
    "parse_header",
    "parse_vector_line",
    "parse_vectors",
    "read_vectors",
]


def parse_header(line: str) -> Tuple[int, int]:
    """
    Parse the ``<word count> <dimension>`` header line.

    Args:
        line: First line of the source file

    Returns:
        Tuple of (word_count, dimension)

    Raises:
        VectorParseError: If the line is not two non-negative integers

    Example:
        >>> parse_header("999994 300\\n")
        (999994, 300)
    """
    parts = line.split()
    if len(parts) != 2:
        raise VectorParseError(
            f"expected '<word count> <dimension>' header, got {line.strip()!r}", 1
        )
    try:
        word_count, dimension = int(parts[0]), int(parts[1])
    except ValueError:
        raise VectorParseError(f"header values must be integers, got {line.strip()!r}", 1) from None
    if word_count < 0 or dimension <= 0:
        raise VectorParseError(f"invalid header values {word_count} {dimension}", 1)
    return word_count, dimension


def parse_vector_line(line: str, dimension: int, line_number=None):
    """
    Parse one ``word v1 ... vD`` line.

    Fields are separated by single spaces; the trailing space fastText writes
    after the last component is ignored. Numbers always use ``.`` as decimal
    separator, whatever the host locale.

    Args:
        line: Raw line from the source file
        dimension: Expected number of vector components
        line_number: 1-based line number, used in error messages

    Returns:
        Tuple of (word, float32 vector)

    Raises:
        VectorParseError: On a wrong field count or a non-numeric component
    """
    fields = line.rstrip().split(" ")
    if len(fields) != dimension + 1:
        raise VectorParseError(
            f"expected a word and {dimension} values, got {len(fields) - 1} values",
            line_number,
        )
    try:
        vector = np.array(fields[1:], dtype=np.float32)
    except ValueError as e:
        raise VectorParseError(f"invalid number for {fields[0]!r}: {e}", line_number) from e
    return fields[0], vector


def _grow(matrix, n_rows):
    grown = np.empty((n_rows, matrix.shape[1]), dtype=matrix.dtype)
    grown[:len(matrix)] = matrix
    return grown


def parse_vectors(lines: Iterable[str], capacity: int = 0, progress: bool = False) -> VectorTable:
    """
    Build a vector table from the lines of a ``.vec`` stream.

    Reads the header, then up to ``min(capacity, word_count)`` vector lines
    (all of them when ``capacity`` is 0). A word that appears twice keeps its
    last vector.

    Args:
        lines: Iterable of text lines, header first
        capacity: Maximum number of vector lines to read; 0 for all
        progress: Show a tqdm progress bar

    Returns:
        VectorTable: The parsed table

    Raises:
        VectorParseError: If the header or any vector line is malformed
    """
    lines = iter(lines)
    try:
        header = next(lines)
    except StopIteration:
        raise VectorParseError("empty vector file", 1) from None

    word_count, dimension = parse_header(header)
    limit = word_count if capacity == 0 else min(word_count, capacity)

    # The header count is only an upper bound; grow the matrix as rows arrive.
    matrix = np.empty((min(limit, INITIAL_ROWS), dimension), dtype=np.float32)
    index = {}
    rows = 0
    read = 0

    with tqdm(total=limit, desc="Parsing vectors", unit=" words", disable=not progress) as pbar:
        for line_number, line in enumerate(islice(lines, limit), start=2):
            read += 1
            word, vector = parse_vector_line(line, dimension, line_number)

            row = index.get(word)
            if row is None:
                row = rows
                index[word] = row
                rows += 1
                if row == len(matrix):
                    matrix = _grow(matrix, min(limit, 2 * len(matrix)))
            else:
                logger.debug(f"Duplicate word {word!r} on line {line_number}; keeping the last vector")
            matrix[row] = vector
            pbar.update(1)

    if read < limit:
        logger.warning(f"Source declared {word_count} words but ended after {read}")

    if rows < len(matrix):
        matrix = matrix[:rows].copy()
    return VectorTable.from_arrays(list(index), matrix, vector_size=dimension)


def read_vectors(path: str | Path, capacity: int = 0, show_progress: bool = False) -> VectorTable:
    """
    Read a vector table from a ``.vec`` text file.

    Args:
        path: Path to the source file
        capacity: Maximum number of vectors to read; 0 for all
        show_progress: Show a tqdm progress bar

    Returns:
        VectorTable: The parsed table

    Raises:
        SourceNotFoundError: If ``path`` does not exist
        VectorParseError: If the file is malformed
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(path)

    logger.debug(f"Reading vectors from {path} (capacity={capacity or 'all'})")
    with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        return parse_vectors(f, capacity=capacity, progress=show_progress)
