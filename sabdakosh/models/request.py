"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..config import get_settings


def _check_limit(v: Optional[int]) -> Optional[int]:
    max_limit = get_settings().max_limit
    if v is not None and v > max_limit:
        raise ValueError(f"limit must be at most {max_limit}")
    return v


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., description="Search query; blank queries return no results")
    limit: Optional[int] = Field(
        None, ge=1, description="Maximum number of results to return"
    )

    @field_validator('query')
    @classmethod
    def strip_query(cls, v: str) -> str:
        """Trim surrounding whitespace from the query."""
        return v.strip()

    @field_validator('limit')
    @classmethod
    def validate_limit(cls, v: Optional[int]) -> Optional[int]:
        """Reject limits above the configured maximum."""
        return _check_limit(v)


class BatchSearchRequest(BaseModel):
    """Request model for batch search queries."""

    queries: List[str] = Field(..., min_length=1, max_length=100, description="List of search queries")
    limit: Optional[int] = Field(
        None, ge=1, description="Maximum number of results per query"
    )

    @field_validator('queries')
    @classmethod
    def strip_queries(cls, v: List[str]) -> List[str]:
        """Trim surrounding whitespace from every query."""
        return [query.strip() for query in v]

    @field_validator('limit')
    @classmethod
    def validate_limit(cls, v: Optional[int]) -> Optional[int]:
        """Reject limits above the configured maximum."""
        return _check_limit(v)
