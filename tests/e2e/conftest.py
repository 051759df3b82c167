"""
Pytest configuration for E2E tests against a deployed catalog API.
"""

import os
import random

import pytest
import requests


@pytest.fixture(scope="session")
def api_url():
    """API URL for the deployed stage, e.g. https://<id>.execute-api.<region>.amazonaws.com/Prod"""
    url = os.getenv("API_URL")
    if not url:
        pytest.skip("API URL not provided. Set the API_URL environment variable.")
    return url.rstrip("/")


@pytest.fixture(scope="session")
def http():
    """Shared HTTP session for API calls."""
    with requests.Session() as session:
        session.headers.update({"Accept": "application/json"})
        yield session


def generate_isbn() -> str:
    return f"978-{random.randint(1_000_000_000, 9_999_999_999)}"


@pytest.fixture
def book_factory(api_url, http):
    """Build unique valid books and delete every one a test created.

    Call book_factory() for a fresh book; book_factory.track(isbn) registers
    an ISBN for cleanup after the test.
    """
    created_isbns = []

    def make_book(**overrides):
        book = {
            "isbn": generate_isbn(),
            "title": "The Clean Coder",
            "author": "Robert C. Martin",
            "shortDescription": "A code of conduct for professional programmers",
            "pageCount": 256,
            "releaseDate": "2011-05-13",
        }
        book.update(overrides)
        return book

    make_book.track = created_isbns.append

    yield make_book

    for isbn in created_isbns:
        http.delete(f"{api_url}/books/{isbn}", timeout=10)
