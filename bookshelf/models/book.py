"""
Bookshelf API: Book Record
===========================

What:  The stored representation of a book on the shelf.
How:   A frozen dataclass. Records are never modified in place; an update
       builds a new record with `dataclasses.replace` and swaps it into the
       collection, so a reader holding a record never sees a half-applied change.
Who:   Created and replaced by BookService; rendered by the Pydantic response
       schema through `to_dict()`.

Field naming:
    Python attributes are snake_case. `to_dict()` emits the wire names the
    browser pages expect (`publishedDate`, `numOfPages`).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Book:
    """
    A single book, identified by its ISBN.

    Lifecycle:
        1. Created by BookService.create (absent → present)
        2. Replaced by update/patch; the ISBN is carried over unchanged
        3. Removed by BookService.delete (present → absent)
    """

    isbn: str
    title: str
    author: str
    publisher: str
    num_of_pages: int
    published_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "publishedDate": self.published_date,
            "publisher": self.publisher,
            "numOfPages": self.num_of_pages,
        }

    def __repr__(self) -> str:
        return f"<Book(isbn={self.isbn!r}, title={self.title!r})>"
