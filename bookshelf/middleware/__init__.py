"""
Bookshelf API: Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [Rate Limit] → [GZip] → [CORS] → Route

    - Request ID sets the correlation ID the later layers log and echo.
    - Logging records method, path, status and duration per request,
      rejected ones included.
    - Rate limiting answers 429 before the route runs.
"""
