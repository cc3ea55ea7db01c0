"""
Vector table loading.

Main entry points:
    VectorStore.load() - Cache-aware loading for a configured capacity
    read_vectors() - Parse a ``.vec`` text file

Key components:
    - source: Text source parsing
    - cache: Binary cache keyed by capacity
    - core: Orchestration and phase timing
"""

from .cache import VectorCache, cache_enabled
from .core import LoadReport, VectorStore, load_vectors
from .source import parse_vectors, read_vectors

__all__ = [
    "VectorCache",
    "cache_enabled",
    "LoadReport",
    "VectorStore",
    "load_vectors",
    "parse_vectors",
    "read_vectors",
]
