"""Global dictionary service instance to avoid circular imports."""

from .config import get_settings
from .service import DictionaryService

# Global dictionary service; the lexicon is installed at startup
settings = get_settings()
dictionary_service = DictionaryService(
    gap_weight=settings.gap_weight,
    prefix_weight=settings.prefix_weight,
    default_limit=settings.default_limit,
)
