"""Request-facing dictionary service: timing, logging and statistics."""

import threading
import time
from typing import Any, Dict, List, Optional, Union

import structlog

from .core.engine import DEFAULT_LIMIT, SearchEngine
from .core.exceptions import MalformedInputError
from .core.fuzzy_matcher import FuzzyMatcher
from .core.lexicon import Lexicon
from .models.response import SearchResponse, SearchResult

logger = structlog.get_logger()

EMPTY_QUERY_MESSAGE = "Empty query"
NO_RESULTS_MESSAGE = "No results"


class DictionaryService:
    """Serves searches over one lexicon and keeps query statistics."""

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        gap_weight: int = 10,
        prefix_weight: int = 1,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self.matcher = FuzzyMatcher(gap_weight=gap_weight, prefix_weight=prefix_weight)
        self.default_limit = default_limit
        self.engine = SearchEngine(
            lexicon if lexicon is not None else Lexicon(), self.matcher, default_limit
        )
        self._lock = threading.Lock()
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "empty_queries": 0,
            "matched_queries": 0,
            "no_match_queries": 0,
            "failed_queries": 0,
            "total_execution_time": 0.0,
        }

    @property
    def lexicon(self) -> Lexicon:
        return self.engine.lexicon

    def load(self, lexicon: Lexicon) -> None:
        """
        Install the lexicon to search.

        Called once at startup, before any query is served.

        Args:
            lexicon: The lexicon built from the dictionary dataset
        """
        self.engine = SearchEngine(lexicon, self.matcher, self.default_limit)

    def search(self, query: Union[str, bytes], limit: Optional[int] = None) -> SearchResponse:
        """
        Search the dictionary for a query.

        Args:
            query: Raw search query; surrounding whitespace is ignored
            limit: Maximum number of results (service default if None)

        Returns:
            SearchResponse with the best matching entries

        Raises:
            MalformedInputError: If the query is not decodable text
        """
        start_time = time.time()
        limit = self.default_limit if limit is None else limit

        if isinstance(query, bytes):
            try:
                query = query.decode("utf-8")
            except UnicodeDecodeError as e:
                self._record("failed_queries", start_time)
                raise MalformedInputError(f"Query is not valid UTF-8: {e}") from e
        query = query.strip()

        if not query:
            execution_time = self._record("empty_queries", start_time)
            return SearchResponse(
                query=query,
                execution_time_ms=execution_time,
                limit=limit,
                total_results=0,
                results=[],
                message=EMPTY_QUERY_MESSAGE,
            )

        engine = self.engine
        try:
            matches = engine.rank(query, limit)
        except MalformedInputError:
            self._record("failed_queries", start_time)
            logger.warning("Malformed search query rejected")
            raise

        results = [
            SearchResult.from_entry(engine.lexicon.entry_at(match.entry_index), match.score)
            for match in matches
        ]

        outcome = "matched_queries" if results else "no_match_queries"
        execution_time = self._record(outcome, start_time)
        logger.info(
            "Search completed",
            query=query,
            total_results=len(results),
            execution_time_ms=round(execution_time, 3),
        )

        return SearchResponse(
            query=query,
            execution_time_ms=execution_time,
            limit=limit,
            total_results=len(results),
            results=results,
            message=None if results else NO_RESULTS_MESSAGE,
        )

    def words(self) -> List[str]:
        """Get every head-word in lexicon order."""
        return list(self.lexicon.keys)

    def _record(self, outcome: str, start_time: float) -> float:
        execution_time = (time.time() - start_time) * 1000
        with self._lock:
            self._stats["total_queries"] += 1
            self._stats[outcome] += 1
            self._stats["total_execution_time"] += execution_time
        return execution_time

    def get_stats(self) -> Dict[str, Any]:
        """Get service statistics."""
        with self._lock:
            stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        stats["total_entries"] = len(self.lexicon)
        return stats

    def reset_stats(self) -> None:
        """Reset query statistics."""
        with self._lock:
            self._stats = self._empty_stats()
