"""Exception hierarchy for the dictionary search core."""


class SabdakoshError(Exception):
    """Base class for all dictionary service errors."""


class EmptyLexiconError(SabdakoshError):
    """Raised when a lexicon is built from zero entries."""


class MalformedInputError(SabdakoshError):
    """Raised when a query or search key is not decodable text."""


class InternalConsistencyError(SabdakoshError):
    """Raised when an entry index falls outside the lexicon.

    This is never expected during normal operation and must not be
    swallowed by callers.
    """


class DictionaryLoadError(SabdakoshError):
    """Raised when the dictionary dataset cannot be read or validated."""
