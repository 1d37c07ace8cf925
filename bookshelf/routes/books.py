"""
Bookshelf API: Book Route Handlers
===================================

What:  CRUD endpoints for books under /book.
How:   Each handler reads the payload (JSON or form), delegates to BookService
       and wraps the returned record in BookResponse.
Who:   Called by the new-book and edit-book browser pages and by API clients.

Request bodies are read by `read_book_payload` rather than declared as a
Pydantic parameter, because the same endpoint accepts JSON and HTML forms.
The OpenAPI request body is filled in from the schemas via `openapi_extra`.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response, status

from bookshelf.dependencies import get_book_service, read_book_payload
from bookshelf.schemas.book import (
    BookCreate,
    BookPatch,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
)
from bookshelf.services.book_service import BookService

router = APIRouter(prefix="/book", tags=["Books"])


def _request_body(schema) -> Dict[str, Any]:
    json_schema = schema.model_json_schema()
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": json_schema},
                "application/x-www-form-urlencoded": {"schema": json_schema},
            },
        }
    }


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BookResponse,
    responses={
        400: {"description": "Missing or malformed fields", "model": ErrorResponse},
        409: {"description": "A book with this ISBN already exists", "model": ErrorResponse},
    },
    summary="Add a book",
    openapi_extra=_request_body(BookCreate),
)
async def create_book(
    payload: Dict[str, Any] = Depends(read_book_payload),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    book = await service.create(payload)
    return BookResponse.from_book(book)


@router.get(
    "",
    response_model=List[BookResponse],
    summary="List every book",
)
async def list_books(
    response: Response,
    service: BookService = Depends(get_book_service),
) -> List[BookResponse]:
    """
    Return all books in the order they were added.

    The total is also sent in the X-Total-Count header.
    """
    books = await service.list_all()
    response.headers["X-Total-Count"] = str(len(books))
    return [BookResponse.from_book(book) for book in books]


@router.get(
    "/{isbn}",
    response_model=BookResponse,
    responses={404: {"description": "Book not found", "model": ErrorResponse}},
    summary="Get a book by ISBN",
)
async def get_book(
    isbn: str,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    book = await service.get_by_isbn(isbn)
    return BookResponse.from_book(book)


_UPDATE_RESPONSES = {
    400: {"description": "Missing or malformed fields", "model": ErrorResponse},
    404: {"description": "Book not found", "model": ErrorResponse},
}


@router.put(
    "/{isbn}",
    response_model=BookResponse,
    responses=_UPDATE_RESPONSES,
    summary="Replace a book's details",
    openapi_extra=_request_body(BookUpdate),
)
async def update_book(
    isbn: str,
    payload: Dict[str, Any] = Depends(read_book_payload),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """
    Replace every field except the ISBN.

    An `isbn` in the body is ignored; the path decides which book changes.
    """
    book = await service.update(isbn, payload)
    return BookResponse.from_book(book)


@router.post(
    "/{isbn}",
    response_model=BookResponse,
    responses=_UPDATE_RESPONSES,
    summary="Replace a book's details (HTML form)",
    openapi_extra=_request_body(BookUpdate),
)
async def update_book_from_form(
    isbn: str,
    payload: Dict[str, Any] = Depends(read_book_payload),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Same as PUT; HTML forms can only submit GET and POST."""
    book = await service.update(isbn, payload)
    return BookResponse.from_book(book)


@router.patch(
    "/{isbn}",
    response_model=BookResponse,
    responses=_UPDATE_RESPONSES,
    summary="Change some of a book's details",
    openapi_extra=_request_body(BookPatch),
)
async def patch_book(
    isbn: str,
    payload: Dict[str, Any] = Depends(read_book_payload),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    book = await service.patch(isbn, payload)
    return BookResponse.from_book(book)


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    responses={404: {"description": "Book not found", "model": ErrorResponse}},
    summary="Delete a book",
)
async def delete_book(
    isbn: str,
    service: BookService = Depends(get_book_service),
) -> MessageResponse:
    removed = await service.delete(isbn)
    return MessageResponse(message=f"Book '{removed.title}' ({removed.isbn}) is deleted")
