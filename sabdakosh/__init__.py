"""
Sabdakosh - Fuzzy head-word search over a static dictionary.

Given an imprecise query, returns the dictionary entries whose head-words
match it as an in-order subsequence, ranked by how tightly and how early
the match occurs.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine, search
from .core.lexicon import Lexicon
from .models.dictionary import Definition, DictionaryEntry

__all__ = [
    "SearchEngine",
    "search",
    "Lexicon",
    "Definition",
    "DictionaryEntry",
]
