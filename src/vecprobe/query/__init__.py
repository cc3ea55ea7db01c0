"""
Nearest-neighbor queries over a vector table.

Key components:
    - distance: Euclidean distance and vector combination
    - engine: Ranking, word-set and analogy queries
"""

from .distance import centroid, combine, direction, distance, distances_to_all, offset
from .engine import DEFAULT_ANALOGIES, QueryEngine, RankedNeighbors, RankedResult

__all__ = [
    "centroid",
    "combine",
    "direction",
    "distance",
    "distances_to_all",
    "offset",
    "DEFAULT_ANALOGIES",
    "QueryEngine",
    "RankedNeighbors",
    "RankedResult",
]
