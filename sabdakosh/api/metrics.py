"""Metrics API endpoints."""

import psutil
from fastapi import APIRouter

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global dictionary service instance
from ..engine_instance import dictionary_service


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get search metrics",
    description="Get query statistics and process memory usage"
)
async def get_metrics() -> MetricsResponse:
    """Get query statistics for the dictionary service."""
    stats = dictionary_service.get_stats()

    memory_info = psutil.Process().memory_info()
    memory_usage_mb = memory_info.rss / (1024 * 1024)  # Convert to MB

    return MetricsResponse(
        total_queries=stats["total_queries"],
        empty_queries=stats["empty_queries"],
        matched_queries=stats["matched_queries"],
        no_match_queries=stats["no_match_queries"],
        failed_queries=stats["failed_queries"],
        average_response_time_ms=stats["average_execution_time_ms"],
        total_entries=stats["total_entries"],
        memory_usage_mb=memory_usage_mb
    )
