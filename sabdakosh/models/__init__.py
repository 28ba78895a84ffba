"""Data models for the dictionary service."""

from .dictionary import Definition, DictionaryEntry
from .request import BatchSearchRequest, SearchRequest
from .response import (
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "Definition",
    "DictionaryEntry",
    "SearchResult",
    "SearchResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
    "BatchSearchRequest",
]
