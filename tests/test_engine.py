"""Tests for vecprobe/query/engine.py - ranking, set and analogy queries."""

import math

import numpy as np
import pytest

from vecprobe.errors import AllWordsMissingError, WordNotFoundError
from vecprobe.query.engine import DEFAULT_ANALOGIES, QueryEngine, RankedNeighbors, RankedResult
from vecprobe.table import VectorTable


class TestNearestNeighbors:
    """Test single word and raw vector queries."""

    def test_pets_scenario(self, engine):
        results = list(engine.nearest_neighbors("cat"))
        assert [r.word for r in results] == ["cat", "fish", "dog"]
        assert results[0] == RankedResult("cat", 0.0)
        assert results[1].distance == pytest.approx(1.0)
        assert results[2].distance == pytest.approx(math.sqrt(2))

    def test_word_ranks_itself_first(self, engine, pets_table):
        for word in pets_table:
            first = engine.nearest_neighbors(word)[0]
            assert first.word == word
            assert first.distance == 0.0

    def test_raw_vector_query(self, engine):
        ranking = engine.nearest_neighbors(np.array([1.0, 1.0]))
        assert ranking[0] == ("fish", 0.0)

    def test_missing_word(self, engine):
        with pytest.raises(WordNotFoundError) as excinfo:
            engine.nearest_neighbors("horse")
        assert isinstance(excinfo.value, KeyError)
        assert excinfo.value.words == ["horse"]
        assert "horse" in str(excinfo.value)

    def test_words_are_case_sensitive(self, engine):
        with pytest.raises(WordNotFoundError):
            engine.nearest_neighbors("Cat")

    def test_wrong_vector_dimension(self, engine):
        with pytest.raises(ValueError):
            engine.nearest_neighbors([1.0, 2.0, 3.0])

    def test_ranking_covers_whole_table(self, engine):
        assert len(engine.nearest_neighbors("dog")) == 3

    def test_ascending_order(self):
        rng = np.random.default_rng(3)
        table = VectorTable.from_arrays([f"w{i}" for i in range(200)], rng.standard_normal((200, 16)))
        distances = [r.distance for r in QueryEngine(table, chunk_size=17).nearest_neighbors("w5")]
        assert distances == sorted(distances)

    def test_ties_keep_table_order(self):
        table = VectorTable.from_dict({"b": [1.0, 0.0], "a": [0.0, 1.0], "c": [-1.0, 0.0]})
        ranking = QueryEngine(table).nearest_neighbors([0.0, 0.0])
        assert ranking.words() == ["b", "a", "c"]


class TestRankedNeighbors:
    """Test the ranked result sequence."""

    def test_restartable(self, engine):
        ranking = engine.nearest_neighbors("cat")
        assert list(ranking) == list(ranking)

    def test_repeated_queries_independent(self, engine):
        first = engine.nearest_neighbors("cat")
        engine.nearest_neighbors("dog")
        assert first.words() == ["cat", "fish", "dog"]

    def test_head_and_slices(self, engine):
        ranking = engine.nearest_neighbors("cat")
        assert [r.word for r in ranking.head(2)] == ["cat", "fish"]
        assert len(ranking.head(100)) == 3
        assert ranking[1:] == ranking.head(3)[1:]
        assert ranking[-1].word == "dog"
        assert ranking.words(1) == ["cat"]

    def test_result_unpacks(self, engine):
        word, dist = engine.nearest_neighbors("cat")[0]
        assert (word, dist) == ("cat", 0.0)
        assert type(dist) is float

    def test_exclusion(self):
        ranking = RankedNeighbors(["a", "b", "c"], np.array([0.3, 0.1, 0.2]), exclude_indices=[2])
        assert ranking.words() == ["b", "a"]
        assert len(ranking) == 2

    def test_repr(self, engine):
        assert "cat (0.00)" in repr(engine.nearest_neighbors("cat"))


class TestNearestNeighborsForSet:
    """Test combined (summed) word set queries."""

    def test_pets_scenario(self, engine):
        ranking, unused = engine.nearest_neighbors_for_set(["cat", "dog"])
        assert unused == []
        assert ranking.head(1) == [RankedResult("fish", 0.0)]
        assert ranking.words() == ["fish"]

    def test_input_words_excluded(self, engine):
        ranking, _ = engine.nearest_neighbors_for_set(["cat"])
        assert "cat" not in ranking.words()
        assert ranking.words() == ["fish", "dog"]

    def test_unused_words_reported_in_order(self, engine):
        ranking, unused = engine.nearest_neighbors_for_set(["zebra", "cat", "horse"])
        assert unused == ["zebra", "horse"]
        assert ranking.words() == ["fish", "dog"]

    def test_absent_input_words_never_returned(self, engine):
        ranking, _ = engine.nearest_neighbors_for_set(["cat", "", "Dog"])
        words = ranking.words()
        assert "cat" not in words and "" not in words and "Dog" not in words

    def test_repeated_unused_word_reported_once(self, engine):
        _, unused = engine.nearest_neighbors_for_set(["zzz", "cat", "zzz"])
        assert unused == ["zzz"]

    def test_all_words_missing(self, engine):
        with pytest.raises(AllWordsMissingError) as excinfo:
            engine.nearest_neighbors_for_set(["zebra", "horse"])
        assert excinfo.value.words == ["zebra", "horse"]

    def test_empty_word_list(self, engine):
        with pytest.raises(AllWordsMissingError):
            engine.nearest_neighbors_for_set([])

    def test_sum_differs_from_average(self):
        table = VectorTable.from_dict({
            "a": [2.0, 0.0],
            "b": [0.0, 2.0],
            "mid": [1.0, 1.0],
            "far": [2.0, 2.0],
        })
        engine = QueryEngine(table)
        summed, _ = engine.nearest_neighbors_for_set(["a", "b"])
        averaged, _ = engine.nearest_neighbors_for_set(["a", "b"], average=True)
        assert summed[0] == ("far", 0.0)
        assert averaged[0] == ("mid", 0.0)


class TestAnalogy:
    """Test directional analogies."""

    def test_pets_scenario(self, engine):
        ranking = engine.analogy("cat", "fish", "dog")
        results = list(ranking)
        # point is (0, 2)
        assert [r.word for r in results] == ["dog", "fish", "cat"]
        assert results[0].distance == pytest.approx(1.0)
        assert results[1].distance == pytest.approx(math.sqrt(2))
        assert results[2].distance == pytest.approx(math.sqrt(5))

    def test_classic_analogy(self):
        table = VectorTable.from_dict({
            "man": [1.0, 0.0, 0.0],
            "woman": [1.0, 1.0, 0.0],
            "king": [1.0, 0.0, 1.0],
            "queen": [1.0, 1.0, 1.0],
            "apple": [-3.0, 0.0, 0.0],
        })
        assert QueryEngine(table).analogy("man", "woman", "king")[0].word == "queen"

    def test_missing_words_listed(self, engine):
        with pytest.raises(WordNotFoundError) as excinfo:
            engine.analogy("cat", "horse", "zebra")
        assert excinfo.value.words == ["horse", "zebra"]

    def test_batch_analogies(self, engine):
        results = engine.analogies([("cat", "fish", "dog"), ["dog", "cat", "fish"]])
        assert [triple for triple, _ in results] == [("cat", "fish", "dog"), ("dog", "cat", "fish")]
        assert results[0][1].words() == engine.analogy("cat", "fish", "dog").words()

    def test_default_analogies_need_their_words(self, engine):
        assert len(DEFAULT_ANALOGIES) == 5
        with pytest.raises(WordNotFoundError):
            engine.analogies()
