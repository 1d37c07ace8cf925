"""
Bookshelf API: Book Service (Book Collection)
==============================================

What:  Owns the collection of books and implements create, list, get, update,
       patch and delete keyed by ISBN.
How:   An insertion-ordered dict maps ISBN → frozen Book record. Payloads are
       validated against the Pydantic request schemas before anything is
       touched; mutations run their read-modify-write under one lock.
Who:   Constructed by the application factory and handed to routes through
       the `get_book_service` dependency. Tests build their own instances.

Operation Summary:
    create(data)          absent  → present   DuplicateKeyError, InvalidInputError
    list_all()            snapshot in insertion order
    get_by_isbn(isbn)     present             NotFoundError
    update(isbn, data)    present → present   NotFoundError, InvalidInputError
    patch(isbn, data)     present → present   NotFoundError, InvalidInputError
    delete(isbn)          present → absent    NotFoundError

Consistency:
    Every failure is raised before the dict is modified, so a failed call
    leaves the collection exactly as it was. Concurrent writers to the same
    ISBN are serialized by the lock; the last one to acquire it wins.
"""

import logging
import threading
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bookshelf.exceptions import DuplicateKeyError, InvalidInputError, NotFoundError
from bookshelf.models.book import Book
from bookshelf.schemas.book import BookCreate, BookPatch, BookUpdate

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def validate_payload(schema: Type[SchemaT], data: Any) -> SchemaT:
    """
    Validate a raw payload against a request schema.

    Raises:
        InvalidInputError: The payload is not a mapping, or a field is missing
            or malformed. The message names every offending field; `errors`
            carries one entry per field for the response `details`.
    """
    if not isinstance(data, Mapping):
        raise InvalidInputError(
            message="Book payload must be an object with named fields",
            context={"received_type": type(data).__name__},
        )
    try:
        return schema.model_validate(dict(data))
    except PydanticValidationError as e:
        errors = [
            {"field": _field_name(err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        message = "; ".join(f"{err['field']}: {err['message']}" for err in errors)
        raise InvalidInputError(
            message=message,
            field=errors[0]["field"] if len(errors) == 1 else None,
            errors=errors,
        ) from e


class BookService:
    """
    In-memory book collection keyed by ISBN.

    Each instance owns its own dict and lock; nothing is shared between
    instances, so an app (or a test) gets a clean shelf by constructing one.

    Methods are coroutines so route handlers can await them like any other
    service call. None of them await while holding the lock.
    """

    resource = "book"

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, isbn: object) -> bool:
        return isbn in self._books

    async def count(self) -> int:
        return len(self)

    async def create(self, book_data: Mapping) -> Book:
        """
        Add a new book to the shelf.

        Args:
            book_data: Payload using wire field names (isbn, title, author,
                publishedDate, publisher, numOfPages).

        Returns:
            The stored Book.

        Raises:
            InvalidInputError: Missing or malformed fields.
            DuplicateKeyError: A book with this ISBN is already stored.
        """
        payload = validate_payload(BookCreate, book_data)
        book = Book(
            isbn=payload.isbn,
            title=payload.title,
            author=payload.author,
            publisher=payload.publisher,
            num_of_pages=payload.num_of_pages,
            published_date=payload.published_date,
        )

        with self._lock:
            if book.isbn in self._books:
                raise DuplicateKeyError(resource=self.resource, key=book.isbn)
            self._books[book.isbn] = book

        logger.info("Book created: %s (%s)", book.isbn, book.title)
        return book

    async def list_all(self) -> List[Book]:
        """Return a snapshot of every book in insertion order."""
        with self._lock:
            return list(self._books.values())

    async def get_by_isbn(self, isbn: str) -> Book:
        """
        Look up one book.

        Raises:
            NotFoundError: No book has this ISBN.
        """
        book = self._books.get(isbn)
        if book is None:
            raise NotFoundError(resource=self.resource, resource_id=isbn)
        return book

    async def update(self, isbn: str, book_data: Mapping) -> Book:
        """
        Replace every non-key field of an existing book.

        The ISBN is taken from the argument; an `isbn` inside `book_data`
        is ignored.

        Raises:
            NotFoundError: No book has this ISBN.
            InvalidInputError: A required field is missing or malformed.
        """
        with self._lock:
            if isbn not in self._books:
                raise NotFoundError(resource=self.resource, resource_id=isbn)
            payload = validate_payload(BookUpdate, book_data)
            updated = Book(
                isbn=isbn,
                title=payload.title,
                author=payload.author,
                publisher=payload.publisher,
                num_of_pages=payload.num_of_pages,
                published_date=payload.published_date,
            )
            self._books[isbn] = updated

        logger.info("Book updated: %s", isbn)
        return updated

    async def patch(self, isbn: str, book_data: Mapping) -> Book:
        """
        Change only the fields present in `book_data`.

        Raises:
            NotFoundError: No book has this ISBN.
            InvalidInputError: A present field is malformed or null.
        """
        with self._lock:
            current = self._books.get(isbn)
            if current is None:
                raise NotFoundError(resource=self.resource, resource_id=isbn)
            changes = validate_payload(BookPatch, book_data).changes()
            updated = replace(current, **changes)
            self._books[isbn] = updated

        logger.info("Book patched: %s (fields: %s)", isbn, ", ".join(sorted(changes)) or "none")
        return updated

    async def delete(self, isbn: str) -> Book:
        """
        Remove a book. Its ISBN can be used again by a later create.

        Returns:
            The removed Book.

        Raises:
            NotFoundError: No book has this ISBN.
        """
        with self._lock:
            try:
                removed = self._books.pop(isbn)
            except KeyError:
                raise NotFoundError(resource=self.resource, resource_id=isbn) from None

        logger.info("Book deleted: %s", isbn)
        return removed
