"""
Lambda handlers for the Book Catalog API

This module serves as the entry point for all Lambda functions.
It builds the catalog service and exposes one handler per operation, plus
router_handler for a single proxy integration in front of every route.

Architecture:
- API Gateway -> Lambda -> BookService -> BookRepository -> DynamoDB

Handlers:
1. list_handler: GET /books, optionally filtered by ?searchTerm=
2. get_book_handler: GET /books/{isbn}
3. create_book_handler: POST /books
4. update_book_handler: PUT /books/{isbn}
5. delete_book_handler: DELETE /books/{isbn}
6. router_handler: dispatches any of the above via ROUTES
"""

import logging

# Support both Lambda deployment and local development
try:
    # Lambda deployment (files are in root, not in catalog_backend/)
    import config
    from db.book_repository import BookRepository
    from db.schema import ensure_books_table
    from handlers import book_handlers
    from services.book_service import BookService
    from utils.response import error_response
except ImportError:
    # Local development / testing (with catalog_backend package structure)
    import catalog_backend.config as config
    from catalog_backend.db.book_repository import BookRepository
    from catalog_backend.db.schema import ensure_books_table
    from catalog_backend.handlers import book_handlers
    from catalog_backend.services.book_service import BookService
    from catalog_backend.utils.response import error_response

logger = logging.getLogger()
logger.setLevel(config.LOG_LEVEL)


def _book_service() -> BookService:
    return BookService(BookRepository(config.books_table))


def initialize_schema() -> None:
    """Create the Books table if needed, blocking until it is ready."""
    if not config.BOOKS_TABLE_NAME:
        logger.warning("BOOKS_TABLE is not set, skipping table initialization")
        return
    config.books_table = ensure_books_table(config.dynamodb, config.BOOKS_TABLE_NAME)


def list_handler(event, context):
    return book_handlers.list_books(event, _book_service())


def get_book_handler(event, context):
    return book_handlers.get_book(event, _book_service())


def create_book_handler(event, context):
    return book_handlers.create_book(event, _book_service())


def update_book_handler(event, context):
    return book_handlers.update_book(event, _book_service())


def delete_book_handler(event, context):
    return book_handlers.delete_book(event, _book_service())


# (httpMethod, API Gateway resource) -> handler
ROUTES = {
    ("GET", "/books"): list_handler,
    ("POST", "/books"): create_book_handler,
    ("GET", "/books/{isbn}"): get_book_handler,
    ("PUT", "/books/{isbn}"): update_book_handler,
    ("DELETE", "/books/{isbn}"): delete_book_handler,
}


def router_handler(event, context):
    """
    Lambda handler for a single proxy integration covering every route.
    Unknown resources get 404; known resources with another method get 405.
    """
    method = (event.get("httpMethod") or "").upper()
    resource = event.get("resource")

    route = ROUTES.get((method, resource))
    if route is not None:
        return route(event, context)

    allowed = [m for (m, r) in ROUTES if r == resource]
    if allowed:
        logger.warning(f"Method {method} not allowed on {resource}")
        response = error_response(
            405, "Method Not Allowed", f"{method} is not supported on {resource}"
        )
        response["headers"]["Allow"] = ", ".join(allowed)
        return response

    logger.warning(f"No route for {method} {resource}")
    return error_response(404, "Not Found", f"No route for {method} {resource}")


if config.CREATE_BOOKS_TABLE:
    initialize_schema()

# Make handlers available at module level for Lambda
__all__ = [
    "list_handler",
    "get_book_handler",
    "create_book_handler",
    "update_book_handler",
    "delete_book_handler",
    "router_handler",
    "ROUTES",
]
