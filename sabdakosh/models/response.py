"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .dictionary import Definition, DictionaryEntry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResult(BaseModel):
    """Individual search result."""

    word: str = Field(..., description="The matched head-word")
    score: int = Field(..., ge=0, description="Match score, lower is a tighter match")
    definitions: Tuple[Definition, ...] = Field(..., description="Definitions of the head-word")

    @classmethod
    def from_entry(cls, entry: DictionaryEntry, score: int) -> "SearchResult":
        return cls(word=entry.word, score=score, definitions=entry.definitions)


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Search query after trimming")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    limit: int = Field(..., description="Maximum number of results that could be returned")
    total_results: int = Field(..., description="Number of results returned")
    results: List[SearchResult] = Field(..., description="Search results, best first")
    message: Optional[str] = Field(None, description="Explanation when there are no results")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    total_entries: int = Field(..., description="Number of entries in the lexicon")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Search metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    empty_queries: int = Field(..., description="Queries that were blank after trimming")
    matched_queries: int = Field(..., description="Queries with at least one result")
    no_match_queries: int = Field(..., description="Queries with no results")
    failed_queries: int = Field(..., description="Queries rejected as malformed")
    average_response_time_ms: float = Field(..., description="Average search time")
    total_entries: int = Field(..., description="Number of entries in the lexicon")
    memory_usage_mb: float = Field(..., description="Resident memory of the process in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
