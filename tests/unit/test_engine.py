"""Unit tests for ranking and selection."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from sabdakosh.core.engine import MatchResult, SearchEngine, search
from sabdakosh.core.exceptions import MalformedInputError
from sabdakosh.core.fuzzy_matcher import FuzzyMatcher
from sabdakosh.core.lexicon import Lexicon
from sabdakosh.models.dictionary import DictionaryEntry


def make_lexicon(words):
    return Lexicon.build([DictionaryEntry(word=word) for word in words])


class TestSearchEngine:
    """Test cases for the SearchEngine class."""

    @pytest.fixture
    def fruit_lexicon(self):
        """A small lexicon of fruit names."""
        return make_lexicon(["apple", "apply", "banana", "guithe", "grape"])

    @pytest.fixture
    def engine(self, fruit_lexicon):
        """Create a search engine over the fruit lexicon."""
        return SearchEngine(fruit_lexicon)

    @pytest.fixture
    def spread_lexicon(self):
        """Thirty keys that all match "ab", worst score first."""
        # "a" + i * "x" + "b" scores 10 * i
        return make_lexicon(["a" + "x" * i + "b" for i in range(29, -1, -1)])

    def test_engine_initialization(self, engine, fruit_lexicon):
        """Test search engine initialization."""
        assert engine.lexicon is fruit_lexicon
        assert engine.default_limit == 25
        assert isinstance(engine.matcher, FuzzyMatcher)

    def test_empty_query(self, engine):
        """Test that an empty query returns no results."""
        assert engine.search("") == []
        assert engine.rank("") == []

    def test_exact_match(self, engine):
        """Test exact head-word matching."""
        ranked = engine.rank("guithe")
        assert ranked[0] == MatchResult(entry_index=3, score=0)
        assert engine.search("guithe")[0].word == "guithe"

    def test_typo_tolerance(self, engine):
        """Test that a dropped letter still finds the word."""
        words = [entry.word for entry in engine.search("aple")]
        assert words[0] == "apple"
        assert "banana" not in words
        if "apply" in words:
            assert words.index("apple") < words.index("apply")

    def test_no_match(self, engine):
        """Test a query with no matching head-word."""
        assert engine.search("zzz") == []

    def test_sorted_by_score_then_index(self):
        """Test ordering by score with lexicon order breaking ties."""
        engine = SearchEngine(make_lexicon(["xab", "ab", "abc", "ab", "axb"]))
        ranked = engine.rank("ab")
        assert [r.entry_index for r in ranked] == [1, 2, 3, 0, 4]
        assert [r.score for r in ranked] == [0, 0, 0, 1, 10]

    def test_results_non_decreasing(self, spread_lexicon):
        """Test that scores never decrease down the result list."""
        ranked = SearchEngine(spread_lexicon).rank("ab", limit=30)
        scores = [r.score for r in ranked]
        assert scores == sorted(scores)
        for a, b in zip(ranked, ranked[1:]):
            if a.score == b.score:
                assert a.entry_index < b.entry_index

    def test_truncation_keeps_best(self, spread_lexicon):
        """Test that truncation happens after sorting."""
        results = SearchEngine(spread_lexicon).search("ab", limit=25)
        assert len(results) == 25
        assert [entry.word for entry in results] == [
            "a" + "x" * i + "b" for i in range(25)
        ]

    def test_default_limit(self, spread_lexicon):
        """Test that the default limit applies when none is given."""
        assert len(SearchEngine(spread_lexicon).search("ab")) == 25
        assert len(SearchEngine(spread_lexicon, default_limit=5).search("ab")) == 5

    @pytest.mark.parametrize("limit", [0, 1, 5, 29, 30, 31, 100])
    def test_limit_bound(self, spread_lexicon, limit):
        """Test that no more than limit results are returned."""
        results = SearchEngine(spread_lexicon).search("ab", limit=limit)
        assert len(results) == min(limit, 30)

    def test_negative_limit(self, engine):
        """Test that a negative limit is rejected."""
        with pytest.raises(ValueError):
            engine.search("apple", limit=-1)

    def test_empty_lexicon(self):
        """Test that an empty lexicon never returns results."""
        engine = SearchEngine(Lexicon())
        assert engine.search("apple") == []
        assert engine.search("") == []

    def test_malformed_query(self, engine):
        """Test that an undecodable query aborts the search."""
        with pytest.raises(MalformedInputError):
            engine.search(b"\xc3\x28")

    def test_bytes_query(self, engine):
        """Test that a UTF-8 encoded query is accepted."""
        assert engine.search(b"guithe")[0].word == "guithe"

    def test_case_insensitive_search(self, engine):
        """Test case-insensitive searches."""
        assert engine.search("GUITHE")[0].word == "guithe"

    def test_custom_matcher(self, fruit_lexicon):
        """Test that the engine scores with the supplied matcher."""
        engine = SearchEngine(fruit_lexicon, FuzzyMatcher(gap_weight=50, prefix_weight=2))
        assert engine.rank("ple")[0] == MatchResult(entry_index=0, score=52)

    def test_devanagari_tie_break(self):
        """Test ranking of Devanagari head-words."""
        engine = SearchEngine(make_lexicon(["आमा", "घर", "मान्छे", "माया"]))
        assert [entry.word for entry in engine.search("मा")] == ["मान्छे", "माया", "आमा"]

    def test_deterministic(self, engine):
        """Test that identical searches give identical results."""
        assert engine.rank("ap") == engine.rank("ap")

    def test_concurrent_searches(self, spread_lexicon):
        """Test that parallel searches over one lexicon agree."""
        engine = SearchEngine(spread_lexicon)
        expected = engine.rank("ab")
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: engine.rank("ab"), range(32)))
        assert all(result == expected for result in results)

    def test_module_search_function(self, fruit_lexicon):
        """Test the module-level search helper."""
        results = search("guithe", fruit_lexicon)
        assert results[0].word == "guithe"
        assert search("", fruit_lexicon) == []
        assert len(search("a", fruit_lexicon, limit=2)) == 2
