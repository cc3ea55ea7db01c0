from __future__ import annotations

from typing import Iterator, List, Sequence

import numpy as np
from gensim.models import KeyedVectors

from .errors import WordNotFoundError

__all__ = ["VectorTable"]


class VectorTable:
    """
    A read-only mapping from word to embedding vector, backed by gensim
    ``KeyedVectors``.

    Words are matched exactly (case-sensitive, no normalization). Iteration
    follows the order in which words were read from the source, which is also
    the tie-breaking order for rankings.
    """

    def __init__(self, keyed_vectors):
        """
        Wrap an existing KeyedVectors instance and freeze its vectors.

        Args:
            keyed_vectors (KeyedVectors): Loaded vectors.
        """
        self.model = keyed_vectors
        self.model.vectors.flags.writeable = False
        self.vector_size = self.model.vector_size

    @classmethod
    def from_arrays(cls, words: Sequence[str], vectors, vector_size=None):
        """
        Build a table from a word list and a matching ``(N, D)`` matrix.

        Args:
            words (Sequence[str]): Unique words, in table order.
            vectors (array-like): One row per word.
            vector_size (int, optional): Dimension D. Required when ``words``
                is empty, otherwise taken from ``vectors``.

        Returns:
            VectorTable: The new table.

        Raises:
            ValueError: If words are duplicated or the shapes disagree.
        """
        words = list(words)
        matrix = np.asarray(vectors, dtype=np.float32)
        if vector_size is None:
            if matrix.ndim != 2:
                raise ValueError("vector_size is required for an empty table.")
            vector_size = matrix.shape[1]
        if not words:
            matrix = np.zeros((0, vector_size), dtype=np.float32)
        if matrix.ndim != 2 or matrix.shape != (len(words), vector_size):
            raise ValueError(
                f"Expected a ({len(words)}, {vector_size}) matrix, got {matrix.shape}."
            )
        if len(set(words)) != len(words):
            raise ValueError("Words in a vector table must be unique.")

        # Assign directly instead of add_vectors(), which copies the whole matrix
        kv = KeyedVectors(vector_size, count=0, dtype=np.float32)
        kv.vectors = matrix
        kv.index_to_key = words
        kv.key_to_index = {word: i for i, word in enumerate(words)}
        # Descending counts, as load_word2vec_format assigns them; saving sorts by count.
        kv.allocate_vecattrs(["count"], [np.int64])
        kv.expandos["count"][:] = np.arange(len(words), 0, -1)
        return cls(kv)

    @classmethod
    def from_dict(cls, mapping, vector_size=None):
        """Build a table from a ``{word: vector}`` dict, keeping its order."""
        words = list(mapping)
        vectors = [mapping[w] for w in words]
        if not vectors:
            return cls.from_arrays([], [], vector_size=vector_size)
        return cls.from_arrays(words, np.vstack(vectors), vector_size=vector_size)

    @property
    def words(self) -> List[str]:
        """Words in table order."""
        return self.model.index_to_key

    @property
    def vectors(self):
        """The ``(N, D)`` float32 matrix, row ``i`` belonging to ``words[i]``."""
        return self.model.vectors

    def index_of(self, word) -> int:
        """Row of ``word`` in ``vectors``."""
        index = self.model.key_to_index.get(word)
        if index is None:
            raise WordNotFoundError([word])
        return index

    def missing(self, words) -> List[str]:
        """Return the words (in input order) that are not in the table."""
        return [w for w in words if w not in self]

    def __getitem__(self, word):
        return self.model.vectors[self.index_of(word)]

    def __contains__(self, word):
        return word in self.model.key_to_index

    def __len__(self):
        return len(self.model.index_to_key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.model.index_to_key)

    def __eq__(self, other):
        # Same keys and bit-identical vectors; order does not matter.
        if not isinstance(other, VectorTable):
            return NotImplemented
        if len(self) != len(other) or self.vector_size != other.vector_size:
            return False
        for word in self:
            if word not in other:
                return False
            if self[word].tobytes() != other[word].tobytes():
                return False
        return True

    __hash__ = None

    def __repr__(self):
        return f"VectorTable(words={len(self)}, vector_size={self.vector_size})"
