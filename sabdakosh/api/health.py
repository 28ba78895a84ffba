"""Health check and monitoring API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global dictionary service instance
from ..engine_instance import dictionary_service

# Track application start time
app_start_time = time.time()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the dictionary service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the dictionary service.

    The service is degraded when the dictionary is empty: it answers
    every search, but never with results.
    """
    total_entries = len(dictionary_service.lexicon)
    dependencies = {
        "lexicon": "healthy" if total_entries else "degraded",
    }

    status = "healthy" if all(s == "healthy" for s in dependencies.values()) else "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        total_entries=total_entries,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """
    Check if the service is ready to accept requests.

    Ready once a lexicon with at least one entry has been loaded.
    """
    total_entries = len(dictionary_service.lexicon)
    if not total_entries:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": "Dictionary is empty",
                "timestamp": _now()
            }
        )

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": _now(),
            "total_entries": total_entries
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": _now(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """Get configuration and statistics of the running service."""
    config_info = {
        "dictionary_path": settings.dictionary_path,
        "default_limit": settings.default_limit,
        "max_limit": settings.max_limit,
        "max_query_length": settings.max_query_length,
        "gap_weight": settings.gap_weight,
        "prefix_weight": settings.prefix_weight,
        "debug": settings.debug
    }

    return JSONResponse(
        status_code=200,
        content={
            "service": {
                "name": settings.app_name,
                "version": settings.app_version,
                "status": "running",
                "uptime": time.time() - app_start_time,
                "start_time": datetime.fromtimestamp(app_start_time, timezone.utc).isoformat()
            },
            "configuration": config_info,
            "statistics": dictionary_service.get_stats(),
            "timestamp": _now()
        }
    )
