"""
Bookshelf API: Application Package
===================================

What: A small REST API for creating, listing, reading, updating and deleting
      book records keyed by ISBN.
Who:  Imported by uvicorn (`bookshelf.main:app`), pytest and the console script.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      BookService (Business Logic)   │  ← Uniqueness, validation, locking
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Frozen records + Pydantic wire models
    └─────────────────────────────────────┘

    The collection lives in memory for the lifetime of the process. Nothing is
    written to disk; restarting the server starts from an empty shelf.
"""

__version__ = "1.0.0"
