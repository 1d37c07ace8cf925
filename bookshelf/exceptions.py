"""
Bookshelf API: Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the ways a book operation can fail.
How:   Each exception carries a human-readable message and an optional context
       dict. Global handlers (registered in main.py) turn them into structured
       JSON error responses with the matching HTTP status code.
Who:   Raised by BookService and the rate limiter; caught by the handlers.

Exception Hierarchy:
    BookshelfError (base)
    ├── InvalidInputError        → 400 Bad Request
    ├── DuplicateKeyError        → 409 Conflict
    ├── NotFoundError            → 404 Not Found
    └── RateLimitExceededError   → 429 Too Many Requests

A failed operation never leaves a partial mutation behind: the service raises
before it touches the collection.
"""

from typing import Any, Dict, List, Optional


class BookshelfError(Exception):
    """
    Base exception for all Bookshelf application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Structured details, returned as ``details`` where useful
    """

    status_code = 500
    error_code = "internal_server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidInputError(BookshelfError):
    """
    Raised when a book payload is missing required fields or is malformed.

    When:    Missing ``numOfPages``, non-numeric page count, empty ISBN,
             a body that is not a JSON object or form.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "invalid_input",
            "message": "numOfPages: Input should be a valid integer",
            "details": {"errors": [{"field": "numOfPages", "message": "..."}]}
        }
    """

    status_code = 400
    error_code = "invalid_input"

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        if errors:
            ctx["errors"] = errors
        super().__init__(message=message, context=ctx)
        self.field = field
        self.errors = errors or []


class DuplicateKeyError(BookshelfError):
    """
    Raised when creating a resource whose natural key is already taken.

    When:    POST /book with an ISBN that is already on the shelf.
    HTTP:    409 Conflict
    """

    status_code = 409
    error_code = "duplicate_key"

    def __init__(
        self,
        resource: str = "resource",
        key: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The {resource} already exists"
        if key:
            message = f"{resource} with ID '{key}' already exists"
        ctx = context or {}
        ctx["resource"] = resource
        if key:
            ctx["key"] = key
        super().__init__(message=message, context=ctx)
        self.key = key


class NotFoundError(BookshelfError):
    """
    Raised when a requested resource does not exist.

    When:    GET, PUT, PATCH or DELETE /book/{isbn} with an unknown ISBN.
    HTTP:    404 Not Found
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class RateLimitExceededError(BookshelfError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
    """

    status_code = 429
    error_code = "rate_limit_exceeded"

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
