"""Main entry point for loading the vector table, from cache or source."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..config import StoreConfig
from ..errors import CorruptCacheError
from ..table import VectorTable
from .cache import VectorCache, cache_enabled
from .source import read_vectors

logger = logging.getLogger(__name__)

__all__ = ["LoadReport", "VectorStore", "load_vectors"]


@dataclass
class LoadReport:
    """Timing of one loading phase.

    Attributes:
        phase: "deserialized", "loaded" or "serialized"
        count: Number of vectors handled
        path: File read or written
        seconds: Wall-clock duration
    """
    phase: str
    count: int
    path: Path
    seconds: float


class VectorStore:
    """
    Produces the vector table for a configured capacity.

    When caching applies (``0 < capacity < cache_ceiling``) and a cache file
    exists it is deserialized; otherwise the text source is parsed and, when
    caching applies, written to the cache right away.
    """

    def __init__(self, config: StoreConfig, cache: Optional[VectorCache] = None):
        self.config = config
        self.cache = cache if cache is not None else VectorCache(config.cache_dir)
        self.last_report: List[LoadReport] = []

    @property
    def cache_mode(self) -> bool:
        return cache_enabled(self.config.capacity, self.config.cache_ceiling)

    def load(self) -> VectorTable:
        """
        Load the table, using the cache when possible.

        Returns:
            VectorTable: The loaded table.

        Raises:
            SourceNotFoundError: If the source must be parsed and is missing.
            VectorParseError: If the source is malformed.
        """
        self.last_report = []
        capacity = self.config.capacity

        if self.cache_mode and self.cache.exists(capacity):
            try:
                return self._load_cached(capacity)
            except CorruptCacheError as e:
                logger.warning(f"{e}; rebuilding from {self.config.source_path}")

        table = self._load_source(capacity)

        if self.cache_mode:
            self._save_cached(table, capacity)

        return table

    def _load_cached(self, capacity):
        start = time.perf_counter()
        table = self.cache.load(capacity)
        self._record("deserialized", len(table), self.cache.path_for(capacity), start)
        return table

    def _load_source(self, capacity):
        start = time.perf_counter()
        table = read_vectors(
            self.config.source_path,
            capacity=capacity,
            show_progress=self.config.show_progress,
        )
        self._record("loaded", len(table), self.config.source_path, start)
        return table

    def _save_cached(self, table, capacity):
        # The cache only saves time on the next run; a failed write is not fatal.
        start = time.perf_counter()
        try:
            path = self.cache.save(table, capacity)
        except OSError as e:
            logger.warning(f"Could not write cache {self.cache.path_for(capacity)}: {e}")
            return
        self._record("serialized", len(table), path, start)

    def _record(self, phase, count, path, start):
        report = LoadReport(phase, count, Path(path), time.perf_counter() - start)
        self.last_report.append(report)
        direction = "into" if phase == "serialized" else "from"
        logger.info(
            f'{phase.capitalize()} {count} words {direction} "{path}" in {report.seconds:.3f} seconds.'
        )


def load_vectors(config: StoreConfig) -> VectorTable:
    """Convenience wrapper: ``VectorStore(config).load()``."""
    return VectorStore(config).load()
