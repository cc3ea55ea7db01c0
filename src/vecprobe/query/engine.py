from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np

from ..errors import AllWordsMissingError, WordNotFoundError
from ..table import VectorTable
from .distance import centroid, combine, direction, distances_to_all, offset

__all__ = [
    "DEFAULT_ANALOGIES",
    "RankedResult",
    "RankedNeighbors",
    "QueryEngine",
]

DEFAULT_ANALOGIES = [
    ("sky", "blue", "grass"),
    ("soccer", "ball", "hockey"),
    ("cabbage", "vegetable", "apple"),
    ("citizen", "state", "student"),
    ("programmer", "code", "plumber"),
]


class RankedResult(NamedTuple):
    word: str
    distance: float


class RankedNeighbors:
    """
    Table words ranked by ascending distance to a query point.

    The ranking is computed once; iterating it yields a fresh iterator each
    time, so the same object can be walked, sliced or re-read without
    interference. Equal distances keep table order.
    """

    def __init__(self, words: Sequence[str], distances, exclude_indices: Iterable[int] = ()):
        """
        Args:
            words (Sequence[str]): Table words, aligned with ``distances``.
            distances (np.ndarray): Distance of each word to the query point.
            exclude_indices (Iterable[int]): Table rows to leave out of the ranking.
        """
        self._words = words
        self._distances = distances
        order = np.argsort(distances, kind="stable")
        exclude_indices = list(exclude_indices)
        if exclude_indices:
            order = order[~np.isin(order, exclude_indices)]
        self._order = order

    def _result(self, index):
        return RankedResult(self._words[index], float(self._distances[index]))

    def __len__(self):
        return len(self._order)

    def __iter__(self):
        for index in self._order:
            yield self._result(index)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return [self._result(i) for i in self._order[item]]
        return self._result(self._order[item])

    def head(self, n: int) -> List[RankedResult]:
        """The ``n`` closest results (fewer if the ranking is shorter)."""
        return self[:n]

    def words(self, n=None) -> List[str]:
        """Ranked words only, optionally limited to the first ``n``."""
        order = self._order if n is None else self._order[:n]
        return [self._words[i] for i in order]

    def __repr__(self):
        preview = ", ".join(f"{w} ({d:.2f})" for w, d in self.head(3))
        return f"RankedNeighbors(n={len(self)}, [{preview}{', ...' if len(self) > 3 else ''}])"


class QueryEngine:
    """
    Nearest-neighbor and vector-arithmetic queries over a vector table.

    Every query scans the whole table (no index) and returns a new
    ``RankedNeighbors``; the engine keeps no per-query state.
    """

    def __init__(self, table: VectorTable, chunk_size=None):
        self.table = table
        self.chunk_size = chunk_size

    def _vector(self, word_or_vector):
        if isinstance(word_or_vector, str):
            return self.table[word_or_vector]
        vector = np.asarray(word_or_vector, dtype=np.float32)
        if vector.shape != (self.table.vector_size,):
            raise ValueError(
                f"Query vector must have shape ({self.table.vector_size},), got {vector.shape}"
            )
        return vector

    def _rank(self, vector, exclude=()):
        exclude_indices = [self.table.index_of(w) for w in exclude if w in self.table]
        kwargs = {"chunk_size": self.chunk_size} if self.chunk_size else {}
        distances = distances_to_all(self.table.vectors, vector, **kwargs)
        return RankedNeighbors(self.table.words, distances, exclude_indices=exclude_indices)

    def nearest_neighbors(self, word_or_vector) -> RankedNeighbors:
        """
        Rank every table word by distance to a word's vector or to a raw vector.

        A word's own entry ranks first, at distance 0.

        Args:
            word_or_vector (str or array-like): Query word, or a vector of the
                table's dimension.

        Returns:
            RankedNeighbors: All table words, closest first.

        Raises:
            WordNotFoundError: If a query word is not in the table.
        """
        return self._rank(self._vector(word_or_vector))

    def nearest_neighbors_for_set(self, words, average=False) -> Tuple[RankedNeighbors, List[str]]:
        """
        Rank table words by distance to the combination of several words.

        Words missing from the table are skipped and reported. The input words
        themselves never appear in the ranking.

        Args:
            words (Iterable[str]): Query words.
            average (bool): Combine with the mean instead of the sum.

        Returns:
            tuple: (RankedNeighbors, list of input words not in the table)

        Raises:
            AllWordsMissingError: If none of the words is in the table.
        """
        words = list(words)
        used = [w for w in words if w in self.table]
        if not used:
            raise AllWordsMissingError(words)

        unused = list(dict.fromkeys(w for w in words if w not in self.table))
        vectors = [self.table[w] for w in used]
        point = centroid(vectors) if average else combine(vectors)

        return self._rank(point, exclude=words), unused

    def analogy(self, from1, to1, from2) -> RankedNeighbors:
        """
        Solve ``from1 : to1 :: from2 : ?``.

        Ranks table words by distance to ``from2 + (to1 - from1)``.

        Raises:
            WordNotFoundError: If any of the three words is not in the table.
        """
        missing = self.table.missing([from1, to1, from2])
        if missing:
            raise WordNotFoundError(missing)

        shift = direction(self.table[from1], self.table[to1])
        return self._rank(offset(self.table[from2], shift))

    def analogies(self, triples=None):
        """
        Run several analogies independently.

        Args:
            triples (Iterable[tuple], optional): ``(from1, to1, from2)`` triples.
                Defaults to ``DEFAULT_ANALOGIES``.

        Returns:
            list: ``(triple, RankedNeighbors)`` pairs, in input order.
        """
        if triples is None:
            triples = DEFAULT_ANALOGIES
        return [(tuple(t), self.analogy(*t)) for t in triples]
