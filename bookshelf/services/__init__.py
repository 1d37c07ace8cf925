# Services package init
"""
Bookshelf API: Services Layer
==============================

What:  Business logic layer sitting between routes (HTTP) and the in-memory shelf.
How:   Services accept plain payloads, validate them against the schemas and
       return domain records. They are reached by routes through FastAPI
       dependency injection (see dependencies.py), never through a global.

Service Inventory:
    - BookService: ISBN-keyed collection with create, list, get, update,
      patch and delete
"""
