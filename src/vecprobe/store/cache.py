"""Binary cache of parsed vector tables, keyed by capacity."""
from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np
from gensim.models import KeyedVectors

from ..config import CACHE_CEILING, build_cache_path
from ..errors import CacheMissError, CorruptCacheError
from ..table import VectorTable

logger = logging.getLogger(__name__)

__all__ = [
    "cache_enabled",
    "VectorCache",
]


def cache_enabled(capacity: int, ceiling: int = CACHE_CEILING) -> bool:
    """
    Whether tables of this capacity are cached.

    Capacity 0 (all vectors) and very large capacities bypass the cache so the
    full table is never written to disk by default.
    """
    return 0 < capacity < ceiling


def _check_header(path: Path, max_header: int = 64):
    """
    Reject a cache whose header declares more vectors than the file can hold.

    Each record is at least a one-byte word, a space and ``4 * dim`` bytes, so
    a damaged count is caught before gensim allocates the matrix for it.
    """
    size = path.stat().st_size
    with open(path, "rb") as f:
        header = f.readline(max_header)
    parts = header.split()
    if not header.endswith(b"\n") or len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise CorruptCacheError(path, f"invalid header {header[:max_header]!r}")

    count, dim = int(parts[0]), int(parts[1])
    if dim == 0 or count * (4 * dim + 2) > size - len(header):
        raise CorruptCacheError(
            path, f"header declares {count} vectors of dimension {dim} in {size} bytes"
        )


class VectorCache:
    """
    Stores vector tables as word2vec binary files named ``serialized_<tag>.bin``.

    Components are written as raw float32, so a table read back is
    bit-identical to the one saved.
    """

    def __init__(self, cache_dir="."):
        self.cache_dir = Path(cache_dir)

    def path_for(self, tag: int) -> Path:
        return build_cache_path(self.cache_dir, tag)

    def exists(self, tag: int) -> bool:
        return self.path_for(tag).is_file()

    def save(self, table: VectorTable, tag: int) -> Path:
        """
        Write ``table`` to the cache file for ``tag``.

        The file is written under a temporary name and renamed into place,
        so an interrupted save never leaves a truncated cache behind.

        Args:
            table (VectorTable): Table to store.
            tag (int): Capacity the table was loaded with.

        Returns:
            Path: The cache file written.

        Raises:
            OSError: If the file cannot be written.
        """
        path = self.path_for(tag)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")

        try:
            table.model.save_word2vec_format(str(tmp_path), binary=True)
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.debug(f"Saved {len(table)} vectors to {path}")
        return path

    def load(self, tag: int) -> VectorTable:
        """
        Read the cached table for ``tag``.

        Args:
            tag (int): Capacity the table was saved with.

        Returns:
            VectorTable: The cached table.

        Raises:
            CacheMissError: If no cache file exists for ``tag``.
            CorruptCacheError: If the file cannot be decoded.
        """
        path = self.path_for(tag)
        if not path.is_file():
            raise CacheMissError(path)

        _check_header(path)
        try:
            kv = KeyedVectors.load_word2vec_format(str(path), binary=True, datatype=np.float32)
        except (ValueError, EOFError, IndexError, MemoryError) as e:
            # UnicodeDecodeError is a ValueError
            raise CorruptCacheError(path, str(e)) from e

        logger.debug(f"Loaded {len(kv.index_to_key)} vectors from {path}")
        return VectorTable(kv)
