"""Loading the dictionary dataset into a lexicon at startup."""

import json
from typing import List

import structlog
from pydantic import TypeAdapter, ValidationError

from .core.exceptions import DictionaryLoadError, EmptyLexiconError, MalformedInputError
from .core.lexicon import Lexicon
from .models.dictionary import DictionaryEntry

logger = structlog.get_logger()

_entries_adapter = TypeAdapter(List[DictionaryEntry])


def load_entries(path: str) -> List[DictionaryEntry]:
    """
    Read dictionary entries from a JSON dataset.

    The dataset is a top-level array of ``{"word": ..., "definitions":
    [{"grammar": ..., "etymology": ..., "senses": [...]}]}`` objects.
    File order is kept as lexicon order.

    Args:
        path: Path to the JSON dataset

    Returns:
        Validated entries in file order

    Raises:
        DictionaryLoadError: If the file is missing, not JSON, or invalid
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise DictionaryLoadError(f"Dictionary file not found: {path}") from e
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DictionaryLoadError(f"Dictionary file is not valid JSON: {e}") from e

    try:
        return _entries_adapter.validate_python(raw)
    except ValidationError as e:
        raise DictionaryLoadError(
            f"Dictionary file has {e.error_count()} invalid field(s): {e}"
        ) from e


def load_lexicon(path: str) -> Lexicon:
    """
    Build the process-wide lexicon from a JSON dataset.

    An empty dataset yields an empty lexicon so the service can still
    start; every search against it returns no results.

    Args:
        path: Path to the JSON dataset

    Returns:
        The constructed lexicon
    """
    entries = load_entries(path)
    try:
        lexicon = Lexicon.build(entries)
    except EmptyLexiconError:
        logger.warning("Dictionary is empty, all searches will return no results", path=path)
        return Lexicon()
    except MalformedInputError as e:
        raise DictionaryLoadError(f"Dictionary contains a malformed head-word: {e}") from e

    logger.info("Dictionary loaded", path=path, total_entries=len(lexicon))
    return lexicon
