"""Euclidean distance and vector combination helpers."""

import numpy as np
from scipy.spatial.distance import cdist

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "distance",
    "distances_to_all",
    "combine",
    "centroid",
    "direction",
    "offset",
]

DEFAULT_CHUNK_SIZE = 65_536


def _as_float64(vector):
    return np.asarray(vector, dtype=np.float64)


def distance(vector1, vector2):
    """
    Euclidean distance between two vectors.

    Accumulated in float64 regardless of the storage precision, so rounding
    does not build up over 300 components.

    Args:
        vector1 (array-like): First vector.
        vector2 (array-like): Second vector, same dimension.

    Returns:
        float: ``sqrt(sum((vector1 - vector2) ** 2))``

    Raises:
        ValueError: If the dimensions differ.
    """
    a = _as_float64(vector1)
    b = _as_float64(vector2)
    if a.shape != b.shape:
        raise ValueError(f"Dimension mismatch: {a.shape} vs {b.shape}")
    diff = a - b
    return float(np.sqrt(np.dot(diff, diff)))


def distances_to_all(matrix, vector, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Euclidean distance from ``vector`` to every row of ``matrix``.

    Rows are converted to float64 one chunk at a time so a million-row table
    never needs a full float64 copy.

    Args:
        matrix (np.ndarray): ``(N, D)`` matrix.
        vector (array-like): Query vector of length D.
        chunk_size (int): Rows per chunk.

    Returns:
        np.ndarray: float64 array of N distances.
    """
    matrix = np.asarray(matrix)
    query = _as_float64(vector).reshape(1, -1)
    if matrix.ndim != 2 or matrix.shape[1] != query.shape[1]:
        raise ValueError(f"Dimension mismatch: {matrix.shape} vs {query.shape[1]}")
    n_rows = matrix.shape[0]

    result = np.empty(n_rows, dtype=np.float64)
    for start in range(0, n_rows, chunk_size):
        chunk = _as_float64(matrix[start:start + chunk_size])
        result[start:start + len(chunk)] = cdist(chunk, query, metric="euclidean")[:, 0]
    return result


def combine(vectors):
    """
    Element-wise sum of the given vectors.

    This is a sum, not a mean: the nearest neighbors of a word set are ranked
    against the summed vector. Use ``centroid`` for the mean.

    Raises:
        ValueError: If ``vectors`` is empty.
    """
    stacked = _stack(vectors)
    return stacked.sum(axis=0, dtype=np.float32)


def centroid(vectors):
    """Element-wise mean of the given vectors."""
    stacked = _stack(vectors)
    return stacked.mean(axis=0, dtype=np.float32)


def direction(from_vector, to_vector):
    """The vector pointing from ``from_vector`` to ``to_vector``."""
    return np.asarray(to_vector, dtype=np.float32) - np.asarray(from_vector, dtype=np.float32)


def offset(vector, delta):
    """``vector`` moved by ``delta``."""
    return np.asarray(vector, dtype=np.float32) + np.asarray(delta, dtype=np.float32)


def _stack(vectors):
    vectors = [np.asarray(v, dtype=np.float32) for v in vectors]
    if not vectors:
        raise ValueError("At least one vector is required.")
    return np.vstack(vectors)
