"""Subsequence fuzzy matching with gap and position scoring."""

from typing import Optional, Union

from .normalizer import TextNormalizer

DEFAULT_GAP_WEIGHT = 10
DEFAULT_PREFIX_WEIGHT = 1


class FuzzyMatcher:
    """Scores how tightly a query matches a candidate head-word.

    A query matches when all of its characters appear in the candidate in
    the same order. The score is ``gap * gap_weight + first * prefix_weight``
    where ``first`` is the position of the first matched character and
    ``gap`` counts unmatched characters between the first and last match.
    Lower is better; an exact prefix scores 0.
    """

    def __init__(
        self,
        gap_weight: int = DEFAULT_GAP_WEIGHT,
        prefix_weight: int = DEFAULT_PREFIX_WEIGHT,
    ) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            gap_weight: Penalty per unmatched character inside the match span
            prefix_weight: Penalty per character before the first match

        Raises:
            ValueError: Unless gap_weight > prefix_weight > 0
        """
        if not gap_weight > prefix_weight > 0:
            raise ValueError(
                f"Weights must satisfy gap_weight > prefix_weight > 0, "
                f"got gap_weight={gap_weight}, prefix_weight={prefix_weight}"
            )
        self.gap_weight = gap_weight
        self.prefix_weight = prefix_weight
        self.normalizer = TextNormalizer()

    def match(
        self,
        query: Union[str, bytes],
        candidate: Union[str, bytes],
    ) -> Optional[int]:
        """
        Match a query against one candidate.

        Args:
            query: Search query
            candidate: Candidate head-word

        Returns:
            The match score, or None if the query is not a subsequence

        Raises:
            MalformedInputError: If either input is not decodable text
        """
        return self.match_normalized(
            self.normalizer.normalize(query),
            self.normalizer.normalize(candidate),
        )

    def match_normalized(self, query: str, candidate: str) -> Optional[int]:
        """
        Match two strings that have already been normalized.

        Walks the candidate once, advancing through the query whenever the
        current characters agree.

        Args:
            query: Normalized search query
            candidate: Normalized candidate head-word

        Returns:
            The match score, or None if the query is not a subsequence
        """
        query_len = len(query)
        if query_len == 0 or query_len > len(candidate):
            return None

        qi = 0
        first = -1
        last = -1
        for ci, char in enumerate(candidate):
            if char != query[qi]:
                continue
            if qi == 0:
                first = ci
            qi += 1
            if qi == query_len:
                last = ci
                break

        if qi < query_len:
            return None

        span = last - first + 1
        gap = span - query_len
        return gap * self.gap_weight + first * self.prefix_weight
