"""Immutable lexicon of dictionary entries and their search keys."""

from typing import Iterable, Tuple

from ..models.dictionary import DictionaryEntry
from .exceptions import EmptyLexiconError, InternalConsistencyError
from .normalizer import TextNormalizer


class Lexicon:
    """Ordered, read-only mapping from position to search key and entry.

    ``keys[i]`` is the head-word of ``entries[i]``. The normalized form of
    every key is computed once here so searches only normalize the query.
    """

    __slots__ = ("_entries", "_keys", "_normalized_keys")

    def __init__(self, entries: Iterable[DictionaryEntry] = ()) -> None:
        """
        Initialize the lexicon.

        Accepts an empty sequence; use ``Lexicon.build`` to reject one.

        Args:
            entries: Dictionary entries in lexicon order

        Raises:
            MalformedInputError: If a head-word is not well-formed text
        """
        normalizer = TextNormalizer()
        self._entries: Tuple[DictionaryEntry, ...] = tuple(entries)
        self._keys: Tuple[str, ...] = tuple(entry.word for entry in self._entries)
        self._normalized_keys: Tuple[str, ...] = tuple(
            normalizer.normalize(key) for key in self._keys
        )

    @classmethod
    def build(cls, entries: Iterable[DictionaryEntry]) -> "Lexicon":
        """
        Build a lexicon, rejecting an empty entry sequence.

        Args:
            entries: Dictionary entries in lexicon order

        Returns:
            The constructed lexicon

        Raises:
            EmptyLexiconError: If no entries were given
        """
        lexicon = cls(entries)
        if not lexicon:
            raise EmptyLexiconError("Cannot build a lexicon from zero entries")
        return lexicon

    @property
    def entries(self) -> Tuple[DictionaryEntry, ...]:
        return self._entries

    @property
    def keys(self) -> Tuple[str, ...]:
        return self._keys

    @property
    def normalized_keys(self) -> Tuple[str, ...]:
        return self._normalized_keys

    def key_at(self, index: int) -> str:
        """Get the search key at a position."""
        self._check_index(index)
        return self._keys[index]

    def entry_at(self, index: int) -> DictionaryEntry:
        """Get the dictionary entry at a position."""
        self._check_index(index)
        return self._entries[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise InternalConsistencyError(
                f"Entry index {index} out of range for lexicon of size {len(self._entries)}"
            )

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon(size={len(self._entries)})"
