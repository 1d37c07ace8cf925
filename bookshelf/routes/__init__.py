"""
Bookshelf API: Routes Package
==============================

Route Inventory:
    - books.py:   POST   /book            (create)
                  GET    /book            (list all)
                  GET    /book/{isbn}     (get one)
                  PUT    /book/{isbn}     (replace fields)
                  POST   /book/{isbn}     (replace fields, HTML form edit page)
                  PATCH  /book/{isbn}     (partial update)
                  DELETE /book/{isbn}     (delete)
    - health.py:  GET    /health          (service health check)

Routes stay thin: read the request, call BookService, shape the response.
Errors raised by the service are turned into responses by the handlers in
main.py.
"""
