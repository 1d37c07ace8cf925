"""
Bookshelf API: Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the wire contract between the browser pages
       and the API.
How:   BookService validates incoming payloads against the request models;
       route handlers declare the response models so FastAPI serializes them
       and documents them in OpenAPI.

Wire names:
    The contract uses the field names the browser pages submit:
    `isbn`, `title`, `author`, `publishedDate`, `publisher`, `numOfPages`.
    Input also accepts `published_date`. Output always uses `publishedDate`.
"""

from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from bookshelf.models.book import Book


_PUBLISHED_DATE_ALIASES = AliasChoices("publishedDate", "published_date")


def _reject_bool(v: Any) -> Any:
    # bool is an int subclass; lax mode would store true as 1.
    if isinstance(v, bool):
        raise ValueError("Page count must be a number, not a boolean")
    return v


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What clients send
# ══════════════════════════════════════════════════════════════════════════


class BookFields(BaseModel):
    """The mutable, non-key fields of a book, all required except the date."""

    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    published_date: Optional[str] = Field(
        default=None,
        validation_alias=_PUBLISHED_DATE_ALIASES,
        description="Publication date, kept as given (e.g. 2018-12-04)",
    )
    publisher: str = Field(description="Publisher name")
    num_of_pages: int = Field(alias="numOfPages", ge=0, description="Page count")

    @field_validator("published_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v: Any) -> Any:
        """HTML forms submit an empty string for an untouched date input."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("num_of_pages", mode="before")
    @classmethod
    def reject_bool_pages(cls, v: Any) -> Any:
        return _reject_bool(v)


class BookCreate(BookFields):
    """
    Payload for POST /book.

    Every field except `publishedDate` must be present. The ISBN is the
    collection key and is stored exactly as sent, so it must not be blank.
    """

    isbn: str = Field(min_length=1, description="ISBN, the book's unique key")

    @field_validator("isbn", mode="before")
    @classmethod
    def reject_blank_isbn(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            raise ValueError("ISBN may not be blank")
        return v


class BookUpdate(BookFields):
    """
    Payload for PUT /book/{isbn}: replaces every non-key field.

    An `isbn` in the body is accepted and ignored; the path decides which
    book is updated.
    """

    isbn: Optional[Any] = Field(default=None, exclude=True)


class BookPatch(BaseModel):
    """
    Payload for PATCH /book/{isbn}: only the fields present change.

    Only `publishedDate` may be cleared with an explicit null.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    published_date: Optional[str] = Field(default=None, validation_alias=_PUBLISHED_DATE_ALIASES)
    publisher: Optional[str] = None
    num_of_pages: Optional[int] = Field(default=None, alias="numOfPages", ge=0)
    isbn: Optional[Any] = Field(default=None, exclude=True)

    @field_validator("title", "author", "publisher", "num_of_pages", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        # Defaults are not validated, so this only sees values the client sent.
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("num_of_pages", mode="before")
    @classmethod
    def reject_bool_pages(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("published_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def changes(self) -> Dict[str, Any]:
        """Attribute names and values the client actually sent, minus the key."""
        return self.model_dump(exclude_unset=True, exclude={"isbn"})


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns
# ══════════════════════════════════════════════════════════════════════════


class BookResponse(BaseModel):
    """A stored book, serialized with the wire field names."""

    isbn: str = Field(description="ISBN, the book's unique key")
    title: str
    author: str
    published_date: Optional[str] = Field(default=None, alias="publishedDate")
    publisher: str
    num_of_pages: int = Field(alias="numOfPages")

    @classmethod
    def from_book(cls, book: Book) -> "BookResponse":
        return cls.model_validate(book.to_dict())


class MessageResponse(BaseModel):
    """Plain confirmation, as returned by DELETE /book/{isbn}."""

    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    Standardized error body for every non-2xx response.

    Example:
        {
            "error": "not_found",
            "message": "book with ID '9781593275846' was not found",
            "details": {"resource": "book", "resource_id": "9781593275846"},
            "request_id": "1f0c2a9b"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check body returned by GET /health."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    books: int = Field(description="Number of books currently on the shelf")
    uptime_seconds: float = Field(description="Seconds since the app was created")
