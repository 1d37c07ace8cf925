"""
Bookshelf API: FastAPI Dependencies
====================================

What:  Providers injected into route handlers with `Depends()`.
How:   The application factory stores the BookService on `app.state`; the
       providers read it back from the current request, so every app instance
       (one per test, one per server process) has its own shelf.
"""

from typing import Any, Dict

from fastapi import Request

from bookshelf.exceptions import InvalidInputError
from bookshelf.services.book_service import BookService

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_book_service(request: Request) -> BookService:
    """Dependency provider for the app's BookService."""
    return request.app.state.book_service


async def read_book_payload(request: Request) -> Dict[str, Any]:
    """
    Read a book payload from a JSON body or an HTML form body.

    The browser pages post forms, while API clients send JSON; both
    end up as a plain dict handed to BookService for validation.

    Raises:
        InvalidInputError: The body is not valid JSON, or is JSON but not an object.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    try:
        data = await request.json()
    except ValueError:
        raise InvalidInputError(
            message="Request body must be a JSON object or form data",
            context={"content_type": content_type or None},
        ) from None

    if not isinstance(data, dict):
        raise InvalidInputError(
            message="Request body must be a JSON object",
            context={"received_type": type(data).__name__},
        )
    return data
