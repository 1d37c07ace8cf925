"""
Bookshelf API: FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds a FastAPI app, attaches its own BookService to
       `app.state`, registers middleware, exception handlers and routes.
Who:   uvicorn imports `bookshelf.main:app`; tests call create_app() directly
       to get an isolated app with an empty shelf.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Req ID      │→│ Logging  │→│  Rate Limit     │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────┐ ┌──────────────┐  │
    │  │ /book, /book/{isbn}          │ │ GET /health  │  │
    │  └──────────────────────────────┘ └──────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Invalid→400 │ NotFound→404 │ Duplicate→409    │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from bookshelf import __version__
from bookshelf.config import Settings, settings as default_settings
from bookshelf.exceptions import DuplicateKeyError, InvalidInputError, NotFoundError
from bookshelf.middleware.logging import RequestLoggingMiddleware
from bookshelf.middleware.rate_limit import RateLimitMiddleware
from bookshelf.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from bookshelf.routes import books, health
from bookshelf.services.book_service import BookService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the whole application.

    Format: 2024-01-15T12:00:00 [INFO] bookshelf.access: GET /book 200 1.2ms ...
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    logger.info("=" * 60)
    logger.info("Bookshelf API %s starting up...", __version__)
    logger.info(
        "Server ready at http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )
    logger.info(
        "API docs: http://%s:%d/docs",
        app_settings.backend_host,
        app_settings.backend_port,
    )
    logger.info("=" * 60)

    yield

    # The shelf is not persisted; everything on it is dropped here.
    logger.info(
        "Bookshelf API shutting down, discarding %d book(s)",
        len(app.state.book_service),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    rid = request_id_var.get("")
    content = {
        "error": error,
        "message": message,
        "request_id": rid,
    }
    if details:
        content["details"] = details
    # 500s are sent by ServerErrorMiddleware, which RequestIDMiddleware never sees.
    headers = {REQUEST_ID_HEADER: rid} if rid else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a consistent error body.

    Handler hierarchy:
        InvalidInputError        → 400 Bad Request
        NotFoundError            → 404 Not Found
        DuplicateKeyError        → 409 Conflict
        Exception (fallback)     → 500 Internal Server Error

    Rate limiting (429) is answered by RateLimitMiddleware directly.

    None of these leave the shelf modified: the service raises before it
    writes.
    """

    @app.exception_handler(InvalidInputError)
    async def handle_invalid_input(request: Request, exc: InvalidInputError):
        """Client sent a malformed book; tell them which fields."""
        logger.warning("[%s] Invalid input: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.error_code, exc.message, exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.error_code, exc.message, exc.context)

    @app.exception_handler(DuplicateKeyError)
    async def handle_duplicate_key(request: Request, exc: DuplicateKeyError):
        logger.warning("[%s] Duplicate key: %s", request_id_var.get(""), exc.message)
        return _error_response(409, exc.error_code, exc.message, exc.context)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500 body, stack trace only in the server log."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    book_service: Optional[BookService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the environment-derived
            module settings.
        book_service: Collection to serve; defaults to a new, empty one.

    Returns:
        Fully configured FastAPI instance.
    """
    app_settings = settings or default_settings

    app = FastAPI(
        title="Bookshelf API",
        description=(
            "A small REST API for a shelf of books. Add, list, read, update and "
            "delete books by ISBN. Data lives in memory and is lost on restart."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.book_service = book_service if book_service is not None else BookService()
    app.state.started_at = time.time()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → RateLimit → GZip → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "X-Total-Count", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    if app_settings.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            max_requests=app_settings.rate_limit_requests,
            window_seconds=app_settings.rate_limit_window,
        )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(books.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(
        "bookshelf.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


app = create_app()
