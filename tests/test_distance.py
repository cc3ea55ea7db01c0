"""Tests for vecprobe/query/distance.py - distance and vector combination."""

import math

import numpy as np
import pytest

from vecprobe.query.distance import (
    centroid,
    combine,
    direction,
    distance,
    distances_to_all,
    offset,
)


@pytest.fixture
def rng():
    return np.random.default_rng(7)


class TestDistance:
    """Test Euclidean distance properties."""

    def test_identity(self, rng):
        v = rng.standard_normal(300).astype(np.float32)
        assert distance(v, v) == 0.0

    def test_symmetry(self, rng):
        a, b = rng.standard_normal((2, 300)).astype(np.float32)
        assert distance(a, b) == distance(b, a)

    def test_triangle_inequality(self, rng):
        for _ in range(20):
            a, b, c = rng.standard_normal((3, 300)).astype(np.float32)
            assert distance(a, c) <= distance(a, b) + distance(b, c) + 1e-12

    def test_known_value(self):
        assert distance([1.0, 0.0], [0.0, 1.0]) == pytest.approx(math.sqrt(2))
        assert distance([0.0, 0.0], [3.0, 4.0]) == 5.0

    def test_double_precision(self):
        """Accumulation happens in float64, not float32."""
        a = np.full(300, 0.1, dtype=np.float32)
        b = np.zeros(300, dtype=np.float32)
        expected = math.sqrt(300 * float(np.float32(0.1)) ** 2)
        assert distance(a, b) == pytest.approx(expected, rel=1e-12)

    def test_returns_python_float(self):
        assert type(distance([1.0], [2.0])) is float

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            distance([1.0, 2.0], [1.0])


class TestDistancesToAll:
    """Test the chunked distance scan."""

    def test_matches_pairwise(self, rng):
        matrix = rng.standard_normal((50, 8)).astype(np.float32)
        query = rng.standard_normal(8).astype(np.float32)
        result = distances_to_all(matrix, query, chunk_size=7)
        expected = [distance(row, query) for row in matrix]
        assert result.dtype == np.float64
        np.testing.assert_allclose(result, expected, rtol=1e-12)

    def test_chunk_size_does_not_change_result(self, rng):
        matrix = rng.standard_normal((33, 4)).astype(np.float32)
        query = rng.standard_normal(4)
        np.testing.assert_array_equal(
            distances_to_all(matrix, query, chunk_size=1),
            distances_to_all(matrix, query, chunk_size=1000),
        )

    def test_empty_matrix(self):
        assert distances_to_all(np.zeros((0, 3), dtype=np.float32), [1.0, 2.0, 3.0]).shape == (0,)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            distances_to_all(np.zeros((2, 3)), [1.0, 2.0])


class TestCombination:
    """Test sum, mean, direction and offset."""

    def test_combine_sums(self):
        assert combine([[1.0, 0.0], [0.0, 1.0], [2.0, 2.0]]).tolist() == [3.0, 3.0]

    def test_combine_single_vector_is_identity(self, rng):
        v = rng.standard_normal(300).astype(np.float32)
        np.testing.assert_array_equal(combine([v]), v)

    def test_combine_is_not_an_average(self):
        assert combine([[2.0], [4.0]]).tolist() == [6.0]

    def test_combine_empty(self):
        with pytest.raises(ValueError):
            combine([])

    def test_centroid_averages(self):
        assert centroid([[2.0, 0.0], [4.0, 2.0]]).tolist() == [3.0, 1.0]

    def test_centroid_empty(self):
        with pytest.raises(ValueError):
            centroid([])

    def test_direction(self):
        assert direction([1.0, 0.0], [1.0, 1.0]).tolist() == [0.0, 1.0]

    def test_offset(self):
        assert offset([0.0, 1.0], [0.0, 1.0]).tolist() == [0.0, 2.0]

    def test_results_are_float32(self):
        assert combine([[1.0]]).dtype == np.float32
        assert direction([1.0], [2.0]).dtype == np.float32
