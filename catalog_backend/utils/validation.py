"""
Request validation utilities for the Book Catalog API

Provides functions to extract data from API Gateway events, to check the
shape of a book payload, and to validate a book against the catalog's
field rules.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime
from typing import Any
from urllib.parse import unquote

# Support both Lambda deployment and local development
try:
    from config import ISBN_PATTERN, MAX_PAGE_COUNT
except ImportError:
    from catalog_backend.config import ISBN_PATTERN, MAX_PAGE_COUNT

logger = logging.getLogger()

ISBN_REGEX = re.compile(ISBN_PATTERN)

STRING_FIELDS = ("isbn", "title", "author", "shortDescription")

# (field, propertyName, display name) in the order failures are reported
REQUIRED_TEXT_FIELDS = (
    ("title", "Title", "Title"),
    ("shortDescription", "ShortDescription", "Short Description"),
    ("author", "Author", "Author"),
)

INVALID_ISBN_MESSAGE = "Value was not a valid ISBN-13"
DUPLICATE_ISBN_MESSAGE = "A book with this ISBN-13 already exists"


def get_path_param(event: dict, param: str) -> tuple[str | None, dict | None]:
    """
    Extract and URL-decode a path parameter from API Gateway event.

    Args:
        event: API Gateway event
        param: Parameter name to extract

    Returns:
        tuple: (decoded_value, error_response) - If successful, error_response is None
    """
    from .response import error_response

    path_params = event.get("pathParameters") or {}
    if param not in path_params or not path_params[param]:
        logger.warning(f"Missing {param} in path parameters")
        return None, error_response(
            400, "Bad Request", f"{param.capitalize()} is required in path"
        )
    return unquote(path_params[param]), None


def get_query_param(event: dict, param: str) -> str | None:
    """Return a query string parameter, or None if absent or empty."""
    query_params = event.get("queryStringParameters") or {}
    value = query_params.get(param)
    return value or None


def parse_json_body(event: dict) -> tuple[Any, dict | None]:
    """
    Parse JSON body from API Gateway event.

    Args:
        event: API Gateway event

    Returns:
        tuple: (parsed_body, error_response) - If successful, error_response is None
               If error, parsed_body is empty dict (caller should check error first)
    """
    from .response import error_response

    try:
        return json.loads(event.get("body") or "{}"), None
    except json.JSONDecodeError:
        logger.warning("Invalid JSON in request body")
        return {}, error_response(400, "Bad Request", "Invalid JSON in request body")


def _parse_release_date(value: Any) -> str | None:
    """Normalize an ISO-8601 date or datetime string to YYYY-MM-DD."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(value)
    return datetime.fromisoformat(value).date().isoformat()


def parse_book_body(body: Any) -> tuple[dict, dict | None]:
    """
    Build a book record from a parsed JSON body, checking field types only.

    Field rules (emptiness, ISBN format, positive page count) are left to
    validate_book() so they can be reported together.

    Args:
        body: Parsed JSON request body

    Returns:
        tuple: (book, error_response) - If successful, error_response is None
    """
    from .response import error_response

    if not isinstance(body, dict):
        return {}, error_response(400, "Bad Request", "Request body must be a JSON object")

    for field in STRING_FIELDS:
        value = body.get(field)
        if value is not None and not isinstance(value, str):
            return {}, error_response(400, "Bad Request", f'Field "{field}" must be a string')

    page_count = body.get("pageCount")
    if page_count is not None and (isinstance(page_count, bool) or not isinstance(page_count, int)):
        return {}, error_response(400, "Bad Request", 'Field "pageCount" must be an integer')
    if page_count is not None and not -MAX_PAGE_COUNT - 1 <= page_count <= MAX_PAGE_COUNT:
        return {}, error_response(
            400, "Bad Request", 'Field "pageCount" must be a 32-bit integer'
        )

    try:
        release_date = _parse_release_date(body.get("releaseDate"))
    except ValueError:
        return {}, error_response(
            400, "Bad Request", 'Field "releaseDate" must be an ISO 8601 date'
        )

    book = {field: body.get(field) for field in STRING_FIELDS}
    book["pageCount"] = page_count
    book["releaseDate"] = release_date
    return book, None


def is_valid_isbn(value: Any) -> bool:
    return isinstance(value, str) and ISBN_REGEX.fullmatch(value) is not None


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_book(book: dict) -> list[dict]:
    """
    Validate a book against the catalog's field rules.

    Every field is checked; each field contributes at most one failure.

    Args:
        book: Book record (as produced by parse_book_body)

    Returns:
        list: {"propertyName", "errorMessage"} failures, empty if valid
    """
    failures = []

    if not is_valid_isbn(book.get("isbn")):
        failures.append({"propertyName": "Isbn", "errorMessage": INVALID_ISBN_MESSAGE})

    for field, property_name, display_name in REQUIRED_TEXT_FIELDS:
        if _is_empty(book.get(field)):
            failures.append(
                {
                    "propertyName": property_name,
                    "errorMessage": f"'{display_name}' must not be empty.",
                }
            )

    page_count = book.get("pageCount")
    if page_count is None or page_count <= 0:
        failures.append(
            {
                "propertyName": "PageCount",
                "errorMessage": "'Page Count' must be greater than '0'.",
            }
        )

    if failures:
        logger.info(f"Book failed validation: {[f['propertyName'] for f in failures]}")
    return failures
