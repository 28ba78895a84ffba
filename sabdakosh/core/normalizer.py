"""Text normalization applied to queries and head-words before matching."""

import unicodedata
from typing import Union

from .exceptions import MalformedInputError


class TextNormalizer:
    """Case-folds text into the form compared by the fuzzy matcher."""

    def __init__(self, form: str = "NFC") -> None:
        """
        Initialize the normalizer.

        Args:
            form: Unicode normalization form applied before case folding
        """
        self.form = form

    def normalize(self, text: Union[str, bytes]) -> str:
        """
        Normalize text for matching.

        Bytes are decoded as strict UTF-8. The result is composed to the
        configured Unicode form and then case-folded.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text

        Raises:
            MalformedInputError: If the input is not well-formed text
        """
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedInputError(f"Input is not valid UTF-8: {e}") from e
        elif not isinstance(text, str):
            raise MalformedInputError(
                f"Expected text, got {type(text).__name__}"
            )

        if not text:
            return ""

        # Lone surrogates survive str construction but cannot be encoded
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedInputError(f"Input contains invalid code points: {e}") from e

        return unicodedata.normalize(self.form, text).casefold()
