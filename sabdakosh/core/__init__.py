"""Core fuzzy search functionality."""

from .engine import MatchResult, SearchEngine, search
from .exceptions import (
    DictionaryLoadError,
    EmptyLexiconError,
    InternalConsistencyError,
    MalformedInputError,
    SabdakoshError,
)
from .fuzzy_matcher import FuzzyMatcher
from .lexicon import Lexicon
from .normalizer import TextNormalizer

__all__ = [
    "SearchEngine",
    "MatchResult",
    "search",
    "FuzzyMatcher",
    "TextNormalizer",
    "Lexicon",
    "SabdakoshError",
    "EmptyLexiconError",
    "MalformedInputError",
    "InternalConsistencyError",
    "DictionaryLoadError",
]
