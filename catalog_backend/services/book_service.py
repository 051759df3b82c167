"""
Catalog service for books

Business rules over the storage gateway. Expected outcomes such as a
duplicate ISBN or a missing book are reported as booleans / None, never
raised; storage failures propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from catalog_backend.db.book_repository import BookRepository

logger = logging.getLogger()


class BookService:
    def __init__(self, repository: "BookRepository"):
        self.repository = repository

    def create(self, book: dict[str, Any]) -> bool:
        """Insert a book; False if its ISBN is already taken."""
        created = self.repository.insert(book)
        if created:
            logger.info(f"Created book: {book['isbn']}")
        else:
            logger.info(f"Book already exists: {book['isbn']}")
        return created

    def get_by_isbn(self, isbn: str) -> dict[str, Any] | None:
        return self.repository.get(isbn)

    def get_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all()

    def search_by_title(self, term: str) -> list[dict[str, Any]]:
        books = self.repository.search_title(term)
        logger.info(f"Search for {term!r} matched {len(books)} books")
        return books

    def update(self, book: dict[str, Any]) -> bool:
        """Overwrite all fields of an existing book; False if it does not exist."""
        updated = self.repository.update(book)
        if updated:
            logger.info(f"Updated book: {book['isbn']}")
        return updated

    def delete(self, isbn: str) -> bool:
        deleted = self.repository.delete(isbn)
        if deleted:
            logger.info(f"Deleted book: {isbn}")
        return deleted
