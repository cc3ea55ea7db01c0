"""Run context: configuration plus the loaded, read-only vector table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .config import StoreConfig
from .query.engine import QueryEngine
from .store.core import LoadReport, VectorStore
from .table import VectorTable

__all__ = ["EmbeddingContext"]


@dataclass(frozen=True)
class EmbeddingContext:
    """Everything a query run needs, built once at startup.

    Attributes:
        config: Store configuration the table was loaded with
        table: The loaded vector table
        engine: Query engine over ``table``
        load_report: Timing of the loading phases
    """
    config: StoreConfig
    table: VectorTable
    engine: QueryEngine
    load_report: List[LoadReport]

    @classmethod
    def build(cls, config: StoreConfig) -> "EmbeddingContext":
        store = VectorStore(config)
        table = store.load()
        return cls(
            config=config,
            table=table,
            engine=QueryEngine(table),
            load_report=list(store.last_report),
        )

    @property
    def dimension(self) -> int:
        return self.table.vector_size
