"""
Response building utilities for the Book Catalog API

Provides functions to create standardized API Gateway responses.
"""

from __future__ import annotations

import json
from typing import Any

BOOK_RESPONSE_FIELDS = (
    "isbn",
    "title",
    "author",
    "shortDescription",
    "pageCount",
    "releaseDate",
)


def api_response(status_code: int, body: Any = None, headers: dict | None = None) -> dict:
    """
    Helper to format API Gateway proxy response.

    Args:
        status_code: HTTP status code
        body: Response body (will be JSON serialized); None sends an empty body
        headers: Extra headers merged over the defaults

    Returns:
        dict: API Gateway response with headers
    """
    response_headers = {"Content-Type": "application/json"}
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "body": "" if body is None else json.dumps(body),
        "headers": response_headers,
    }


def error_response(status_code: int, error: str, message: str) -> dict:
    """
    Helper to create error response.

    Args:
        status_code: HTTP status code
        error: Error type/category
        message: Error message

    Returns:
        dict: API Gateway error response
    """
    return api_response(status_code, {"error": error, "message": message})


def validation_error_response(failures: list[dict]) -> dict:
    """400 response whose body is the list of {propertyName, errorMessage} failures."""
    return api_response(400, failures)


def not_found_response(isbn: str) -> dict:
    return error_response(404, "Not Found", f'Book "{isbn}" not found')


def serialize_book_response(book: dict) -> dict:
    """
    Convert a stored book record to API response format.

    Args:
        book: Plain book record from the catalog service

    Returns:
        dict: Book object with a fixed field order; missing fields are null
    """
    return {field: book.get(field) for field in BOOK_RESPONSE_FIELDS}
