"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Path

from ..models.response import SearchResponse
from ..models.request import SearchRequest, BatchSearchRequest
from ..core.exceptions import MalformedInputError
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global dictionary service instance
from ..engine_instance import dictionary_service


def _run_search(query: str, limit: Optional[int]) -> SearchResponse:
    """Validate the trimmed query length and search, mapping bad input to 400."""
    query = query.strip()
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        return dictionary_service.search(query, limit)
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=f"Malformed query: {e}")


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search the dictionary",
    description="Fuzzy search for head-words matching the query string"
)
async def search_dictionary(
    searchquery: str = Query("", description="The word to search for"),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=settings.max_limit,
        description="Maximum number of results to return"
    )
) -> SearchResponse:
    """
    Search for dictionary entries matching a query.

    A blank query is not an error: it returns an empty result list
    with an explanatory message.
    """
    return _run_search(searchquery, limit)


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search by path",
    description="Fuzzy search with the query given in the URL path"
)
async def search_word(
    query: str = Path(..., description="The word to search for", min_length=1),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=settings.max_limit,
        description="Maximum number of results to return"
    )
) -> SearchResponse:
    """Search for dictionary entries matching the path query."""
    return _run_search(query, limit)


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search the dictionary using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search for dictionary entries using a JSON request body."""
    return _run_search(request.query, request.limit)


@router.post(
    "/search/batch",
    response_model=list[SearchResponse],
    summary="Batch search",
    description="Search multiple queries in a single request"
)
async def batch_search(request: BatchSearchRequest) -> list[SearchResponse]:
    """
    Perform batch search for multiple queries.

    Results are returned in the order the queries were given.
    """
    return [_run_search(query, request.limit) for query in request.queries]


@router.get(
    "/words",
    response_model=list[str],
    summary="Get all head-words",
    description="Get every head-word in the dictionary, in dictionary order"
)
async def get_all_words() -> list[str]:
    """Get all head-words currently loaded."""
    return dictionary_service.words()
