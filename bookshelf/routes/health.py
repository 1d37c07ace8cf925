"""
Bookshelf API: Health Check Route
==================================

What:  Liveness endpoint for Docker health checks and load balancers.
How:   The shelf is in memory, so there are no external dependencies to probe;
       the check reports the version, the number of stored books and uptime.
"""

import time

from fastapi import APIRouter, Depends, Request

from bookshelf import __version__
from bookshelf.dependencies import get_book_service
from bookshelf.schemas.book import HealthResponse
from bookshelf.services.book_service import BookService

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    service: BookService = Depends(get_book_service),
) -> HealthResponse:
    started_at = request.app.state.started_at
    return HealthResponse(
        status="healthy",
        version=__version__,
        books=await service.count(),
        uptime_seconds=round(time.time() - started_at, 2),
    )
