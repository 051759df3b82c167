"""
Request handlers for book CRUD and search operations

Each function takes an API Gateway proxy event and the BookService to use,
and returns an API Gateway proxy response. The Lambda entry points in
handler.py construct the service and call these.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

# Support both Lambda deployment and local development
try:
    # Lambda deployment
    import config
    from utils.response import (
        api_response,
        error_response,
        not_found_response,
        serialize_book_response,
        validation_error_response,
    )
    from utils.validation import (
        DUPLICATE_ISBN_MESSAGE,
        get_path_param,
        get_query_param,
        is_valid_isbn,
        parse_book_body,
        parse_json_body,
        validate_book,
    )
except ImportError:
    # Local development
    import catalog_backend.config as config
    from catalog_backend.utils.response import (
        api_response,
        error_response,
        not_found_response,
        serialize_book_response,
        validation_error_response,
    )
    from catalog_backend.utils.validation import (
        DUPLICATE_ISBN_MESSAGE,
        get_path_param,
        get_query_param,
        is_valid_isbn,
        parse_book_body,
        parse_json_body,
        validate_book,
    )

if TYPE_CHECKING:
    from catalog_backend.services.book_service import BookService

logger = logging.getLogger()
logger.setLevel(config.LOG_LEVEL)


def _book_location(isbn: str) -> str:
    return f"{config.BOOKS_RESOURCE}/{isbn}"


def list_books(event: dict, service: "BookService") -> dict:
    """
    List all books, or only those whose title contains the searchTerm
    query parameter. Always 200, possibly with an empty list.
    """
    logger.info("list_books invoked")

    try:
        search_term = get_query_param(event, "searchTerm")
        if search_term:
            books = service.search_by_title(search_term)
        else:
            books = service.get_all()

        logger.info(f"Returning {len(books)} books")
        return api_response(200, [serialize_book_response(book) for book in books])

    except Exception as e:
        logger.error(f"Error listing books: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", str(e))


def get_book(event: dict, service: "BookService") -> dict:
    """Return the book identified by the 'isbn' path parameter, or 404."""
    logger.info("get_book invoked")

    try:
        isbn, error = get_path_param(event, "isbn")
        if error:
            return error

        # A malformed ISBN can never be stored
        book = service.get_by_isbn(isbn) if is_valid_isbn(isbn) else None
        if book is None:
            logger.warning(f"Book not found: {isbn}")
            return not_found_response(isbn)  # type: ignore[arg-type]

        return api_response(200, serialize_book_response(book))

    except Exception as e:
        logger.error(f"Error fetching book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", str(e))


def create_book(event: dict, service: "BookService") -> dict:
    """
    Create a book from the JSON body.

    Returns 400 with the validation failures (or a single Isbn failure when
    the ISBN is already taken), otherwise 201 with a Location header.
    """
    logger.info("create_book invoked")

    try:
        body, error = parse_json_body(event)
        if error:
            return error

        book, error = parse_book_body(body)
        if error:
            return error

        failures = validate_book(book)
        if failures:
            return validation_error_response(failures)

        if not service.create(book):
            logger.warning(f"Duplicate ISBN rejected: {book['isbn']}")
            return validation_error_response(
                [{"propertyName": "Isbn", "errorMessage": DUPLICATE_ISBN_MESSAGE}]
            )

        return api_response(
            201,
            serialize_book_response(book),
            headers={"Location": _book_location(book["isbn"])},
        )

    except Exception as e:
        logger.error(f"Error creating book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", str(e))


def update_book(event: dict, service: "BookService") -> dict:
    """
    Overwrite every field of the book identified by the 'isbn' path
    parameter. The path ISBN replaces any ISBN in the body.
    """
    logger.info("update_book invoked")

    try:
        isbn, error = get_path_param(event, "isbn")
        if error:
            return error

        body, error = parse_json_body(event)
        if error:
            return error

        # The path ISBN replaces whatever the body carries
        if isinstance(body, dict):
            body = {**body, "isbn": isbn}

        book, error = parse_book_body(body)
        if error:
            return error

        failures = validate_book(book)
        if failures:
            return validation_error_response(failures)

        if not service.update(book):
            logger.warning(f"Book not found: {isbn}")
            return not_found_response(isbn)  # type: ignore[arg-type]

        return api_response(200, serialize_book_response(book))

    except Exception as e:
        logger.error(f"Error updating book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", str(e))


def delete_book(event: dict, service: "BookService") -> dict:
    """Delete the book identified by the 'isbn' path parameter. 204 or 404."""
    logger.info("delete_book invoked")

    try:
        isbn, error = get_path_param(event, "isbn")
        if error:
            return error

        if not is_valid_isbn(isbn) or not service.delete(isbn):  # type: ignore[arg-type]
            logger.warning(f"Book not found: {isbn}")
            return not_found_response(isbn)  # type: ignore[arg-type]

        return api_response(204)

    except Exception as e:
        logger.error(f"Error deleting book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", str(e))
