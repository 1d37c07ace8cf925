"""
Bookshelf API: Schema Tests
============================

What:  Direct tests for the Pydantic request and response models.
How:   model_validate on plain dicts, the same way BookService feeds them.
"""

import pytest
from pydantic import ValidationError

from bookshelf.models.book import Book
from bookshelf.schemas.book import BookCreate, BookPatch, BookResponse, BookUpdate


class TestBookCreate:

    def test_wire_names_map_to_attributes(self, sample_book_data):
        payload = BookCreate.model_validate(sample_book_data)

        assert payload.published_date == "2014-12-14"
        assert payload.num_of_pages == 472

    def test_snake_case_date_accepted(self, sample_book_data):
        data = dict(sample_book_data)
        data["published_date"] = data.pop("publishedDate")

        assert BookCreate.model_validate(data).published_date == "2014-12-14"

    def test_blank_date_becomes_none(self, sample_book_data):
        payload = BookCreate.model_validate(dict(sample_book_data, publishedDate="  "))

        assert payload.published_date is None

    def test_isbn_kept_verbatim(self, sample_book_data):
        payload = BookCreate.model_validate(dict(sample_book_data, isbn="978-1593275846 "))

        assert payload.isbn == "978-1593275846 "

    @pytest.mark.parametrize("isbn", ["", "   "])
    def test_blank_isbn_rejected(self, sample_book_data, isbn):
        with pytest.raises(ValidationError):
            BookCreate.model_validate(dict(sample_book_data, isbn=isbn))

    def test_page_count_text_coerced(self, sample_book_data):
        assert BookCreate.model_validate(dict(sample_book_data, numOfPages="472")).num_of_pages == 472

    @pytest.mark.parametrize("pages", [True, False])
    def test_boolean_page_count_rejected(self, sample_book_data, pages):
        with pytest.raises(ValidationError) as exc_info:
            BookCreate.model_validate(dict(sample_book_data, numOfPages=pages))

        assert exc_info.value.errors()[0]["loc"] == ("numOfPages",)


class TestBookUpdate:

    def test_isbn_accepted_and_not_dumped(self, sample_book_data):
        payload = BookUpdate.model_validate(sample_book_data)

        assert "isbn" not in payload.model_dump()

    def test_isbn_optional(self, sample_book_data):
        data = dict(sample_book_data)
        del data["isbn"]

        assert BookUpdate.model_validate(data).title == "Eloquent JavaScript"


class TestBookPatch:

    def test_changes_only_sent_fields(self):
        patch = BookPatch.model_validate({"numOfPages": 480, "isbn": "ignored"})

        assert patch.changes() == {"num_of_pages": 480}

    def test_null_date_is_a_change(self):
        assert BookPatch.model_validate({"publishedDate": None}).changes() == {
            "published_date": None
        }

    @pytest.mark.parametrize("field", ["title", "author", "publisher", "numOfPages"])
    def test_null_rejected_for_required_fields(self, field):
        with pytest.raises(ValidationError):
            BookPatch.model_validate({field: None})

    def test_boolean_page_count_rejected(self):
        with pytest.raises(ValidationError):
            BookPatch.model_validate({"numOfPages": True})


class TestBookResponse:

    def test_serializes_wire_names(self):
        book = Book(
            isbn="9781593275846",
            title="Eloquent JavaScript",
            author="Marijn Haverbeke",
            publisher="No Starch Press",
            num_of_pages=472,
        )

        dumped = BookResponse.from_book(book).model_dump(by_alias=True)

        assert dumped == {
            "isbn": "9781593275846",
            "title": "Eloquent JavaScript",
            "author": "Marijn Haverbeke",
            "publishedDate": None,
            "publisher": "No Starch Press",
            "numOfPages": 472,
        }
