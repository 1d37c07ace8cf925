"""
Bookshelf API: Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, so every test starts from an empty shelf):
    ├── book_service: A fresh BookService
    ├── sample_book_data / second_book_data: Valid payloads with wire field names
    ├── test_settings: Settings with a generous rate limit
    ├── test_app: An app built by create_app() around `book_service`
    └── test_client: HTTPX AsyncClient talking to `test_app` in-process
"""

import os

# Set before any bookshelf import reads the environment.
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bookshelf.config import Settings
from bookshelf.main import create_app
from bookshelf.services.book_service import BookService


@pytest.fixture
def book_service():
    return BookService()


@pytest.fixture
def sample_book_data():
    """The example book used throughout the docs."""
    return {
        "isbn": "9781593275846",
        "title": "Eloquent JavaScript",
        "author": "Marijn Haverbeke",
        "publishedDate": "2014-12-14",
        "publisher": "No Starch Press",
        "numOfPages": 472,
    }


@pytest.fixture
def second_book_data():
    return {
        "isbn": "9781449331818",
        "title": "Learning JavaScript Design Patterns",
        "author": "Addy Osmani",
        "publishedDate": "2012-07-01",
        "publisher": "O'Reilly Media",
        "numOfPages": 254,
    }


@pytest.fixture
def test_settings():
    return Settings(
        log_level="WARNING",
        cors_origins="http://localhost:3000",
        rate_limit_enabled=True,
        rate_limit_requests=1000,
        rate_limit_window=60,
    )


@pytest.fixture
def test_app(test_settings, book_service):
    return create_app(settings=test_settings, book_service=book_service)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
