"""Main FastAPI application for the Sabdakosh dictionary service."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    search_router,
    health_router,
    metrics_router,
)
from .config import Settings, get_settings
from .core.exceptions import DictionaryLoadError, InternalConsistencyError
from .engine_instance import dictionary_service
from .loader import load_lexicon
from .models.response import ErrorResponse

APP_DESCRIPTION = "Fuzzy head-word search over a static dictionary"


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging at the configured level and format."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        # Devanagari head-words stay readable in the log stream
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


settings = get_settings()
configure_logging(settings)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the dictionary once before serving any search."""
    logger.info(
        "Starting Sabdakosh service",
        version=settings.app_version,
        dictionary_path=settings.dictionary_path,
    )

    try:
        lexicon = load_lexicon(settings.dictionary_path)
    except DictionaryLoadError as e:
        logger.error("Failed to load dictionary", path=settings.dictionary_path, error=str(e))
        raise
    dictionary_service.load(lexicon)

    yield

    logger.info("Shutting down Sabdakosh service", stats=dictionary_service.get_stats())


app = FastAPI(
    title=settings.app_name,
    description=APP_DESCRIPTION,
    version=settings.app_version,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log each request with its status and duration."""
    start_time = time.time()
    response = await call_next(request)

    logger.info(
        "Request handled",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round((time.time() - start_time) * 1000, 2)
    )
    return response


def _error_response(error: str, message: str, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=error,
            message=message,
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


@app.exception_handler(InternalConsistencyError)
async def consistency_error_handler(request: Request, exc: InternalConsistencyError) -> JSONResponse:
    """Report a ranking index that fell outside the lexicon."""
    logger.critical(
        "Lexicon index out of range",
        path=request.url.path,
        lexicon_size=len(dictionary_service.lexicon),
        error=str(exc),
        exc_info=exc
    )
    return _error_response("Internal Consistency Error", "Search produced an invalid result", exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log any other unhandled exception and answer 500."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc
    )
    return _error_response("Internal Server Error", "An unexpected error occurred", exc)


app.include_router(search_router)
app.include_router(health_router)
app.include_router(metrics_router)


@app.get("/", summary="Service information")
async def root() -> dict:
    """Name, version and where to look next."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": APP_DESCRIPTION,
        "entries": len(dictionary_service.lexicon),
        "search_url": "/api/v1/search?searchquery={query}",
        "health_url": "/api/v1/health",
        "status": "running"
    }


@app.get("/api", summary="Endpoint listing")
async def api_info() -> dict:
    """List the endpoints and the search limits in force."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": APP_DESCRIPTION,
        "endpoints": {
            "search": "/api/v1/search?searchquery={query}",
            "search_path": "/api/v1/search/{query}",
            "batch_search": "/api/v1/search/batch",
            "words": "/api/v1/words",
            "health": "/api/v1/health",
            "metrics": "/api/v1/metrics"
        },
        "features": [
            "Subsequence fuzzy matching",
            "Case-insensitive searches",
            "Ranking by match tightness and position",
            "Configurable result limit"
        ],
        "search": {
            "default_limit": settings.default_limit,
            "max_limit": settings.max_limit,
            "max_query_length": settings.max_query_length,
            "gap_weight": settings.gap_weight,
            "prefix_weight": settings.prefix_weight
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sabdakosh.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
