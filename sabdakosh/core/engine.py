"""Ranking and selection of dictionary entries for a query."""

from dataclasses import dataclass
from typing import List, Optional, Union

from ..models.dictionary import DictionaryEntry
from .fuzzy_matcher import FuzzyMatcher
from .lexicon import Lexicon

DEFAULT_LIMIT = 25


@dataclass(frozen=True)
class MatchResult:
    """A matched lexicon position and its score."""

    entry_index: int
    score: int


class SearchEngine:
    """Runs the fuzzy matcher over a lexicon and keeps the best matches."""

    def __init__(
        self,
        lexicon: Lexicon,
        matcher: Optional[FuzzyMatcher] = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            lexicon: The lexicon to search
            matcher: Fuzzy matcher (default weights if None)
            default_limit: Result limit used when a search gives none
        """
        self.lexicon = lexicon
        self.matcher = matcher or FuzzyMatcher()
        self.default_limit = default_limit

    def rank(
        self,
        query: Union[str, bytes],
        limit: Optional[int] = None,
    ) -> List[MatchResult]:
        """
        Score every head-word against a query and keep the best.

        Results are ordered by ascending score, ties broken by lexicon
        order. Truncation happens after sorting.

        Args:
            query: Search query
            limit: Maximum number of results (engine default if None)

        Returns:
            Sorted match results, at most ``limit`` of them

        Raises:
            MalformedInputError: If the query is not decodable text
            ValueError: If limit is negative
        """
        limit = self.default_limit if limit is None else limit
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        normalized_query = self.matcher.normalizer.normalize(query)
        if not normalized_query or limit == 0:
            return []

        match = self.matcher.match_normalized
        results = []
        for index, key in enumerate(self.lexicon.normalized_keys):
            score = match(normalized_query, key)
            if score is not None:
                results.append(MatchResult(entry_index=index, score=score))

        results.sort(key=lambda result: (result.score, result.entry_index))
        return results[:limit]

    def search(
        self,
        query: Union[str, bytes],
        limit: Optional[int] = None,
    ) -> List[DictionaryEntry]:
        """
        Find the dictionary entries that best match a query.

        Args:
            query: Search query
            limit: Maximum number of entries (engine default if None)

        Returns:
            Matching entries, best first; empty for an empty query or no match
        """
        return [
            self.lexicon.entry_at(result.entry_index)
            for result in self.rank(query, limit)
        ]


def search(
    query: Union[str, bytes],
    lexicon: Lexicon,
    limit: int = DEFAULT_LIMIT,
) -> List[DictionaryEntry]:
    """Search a lexicon with the default matcher weights."""
    return SearchEngine(lexicon).search(query, limit)
