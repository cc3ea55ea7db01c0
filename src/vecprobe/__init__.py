"""
Nearest-neighbor queries over pretrained word vectors.

This package loads a fastText/word2vec text embedding file (with a binary
cache keyed by the number of vectors loaded) and ranks words by Euclidean
distance to a word, to the combination of several words, or to an analogy
point.

Main components:
    - store: Source parsing, binary cache and cache-aware loading
    - query: Distance helpers and the query engine
    - context: Immutable run context built once at startup
    - cli: The ``vecprobe`` command
"""

from .config import QueryConfig, StoreConfig
from .context import EmbeddingContext
from .errors import (
    AllWordsMissingError,
    CacheMissError,
    CorruptCacheError,
    InputNotFoundError,
    SourceNotFoundError,
    UsageError,
    VecprobeError,
    VectorParseError,
    WordNotFoundError,
)
from .query import QueryEngine, RankedNeighbors, RankedResult
from .store import VectorCache, VectorStore, read_vectors
from .table import VectorTable

__version__ = "0.1.0"

__all__ = [
    "QueryConfig",
    "StoreConfig",
    "EmbeddingContext",
    "AllWordsMissingError",
    "CacheMissError",
    "CorruptCacheError",
    "InputNotFoundError",
    "SourceNotFoundError",
    "UsageError",
    "VecprobeError",
    "VectorParseError",
    "WordNotFoundError",
    "QueryEngine",
    "RankedNeighbors",
    "RankedResult",
    "VectorCache",
    "VectorStore",
    "read_vectors",
    "VectorTable",
]
