"""
Storage gateway for the Books table

BookRepository wraps a DynamoDB Table and exposes the storage operations the
catalog needs. Writes are conditional, so "already exists" and "not found"
are decided by DynamoDB in the same request that performs the write.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from botocore.exceptions import ClientError

# Support both Lambda deployment and local development
try:
    from utils.dynamodb import build_overwrite_params, is_conditional_check_failure, item_to_record
except ImportError:
    from catalog_backend.utils.dynamodb import (
        build_overwrite_params,
        is_conditional_check_failure,
        item_to_record,
    )

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.service_resource import Table

logger = logging.getLogger()

# Every attribute except the key, in response order
BOOK_FIELDS = ("title", "author", "shortDescription", "pageCount", "releaseDate")


class BookRepository:
    """DynamoDB access for book records keyed by ``isbn``."""

    def __init__(self, table: "Table"):
        self.table = table

    def insert(self, book: dict[str, Any]) -> bool:
        """
        Store a new book.

        Returns:
            bool: False if a book with the same ISBN is already stored
        """
        item = {name: value for name, value in book.items() if value is not None}
        try:
            self.table.put_item(
                Item=item, ConditionExpression="attribute_not_exists(isbn)"
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                return False
            raise
        return True

    def get(self, isbn: str) -> dict[str, Any] | None:
        response = self.table.get_item(Key={"isbn": isbn})
        if "Item" not in response:
            return None
        return item_to_record(response["Item"])

    def list_all(self) -> list[dict[str, Any]]:
        return self._scan()

    def search_title(self, term: str) -> list[dict[str, Any]]:
        """Return books whose title contains ``term`` (case-sensitive)."""
        return self._scan(
            FilterExpression="contains(#title, :term)",
            ExpressionAttributeNames={"#title": "title"},
            ExpressionAttributeValues={":term": term},
        )

    def update(self, book: dict[str, Any]) -> bool:
        """
        Overwrite every attribute of an existing book.

        A None releaseDate removes the attribute.

        Returns:
            bool: False if no book with this ISBN exists (nothing is written)
        """
        update_params = build_overwrite_params(
            key={"isbn": book["isbn"]},
            fields={name: book.get(name) for name in BOOK_FIELDS},
        )
        try:
            self.table.update_item(**update_params)
        except ClientError as e:
            if is_conditional_check_failure(e):
                return False
            raise
        return True

    def delete(self, isbn: str) -> bool:
        try:
            self.table.delete_item(
                Key={"isbn": isbn}, ConditionExpression="attribute_exists(isbn)"
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                return False
            raise
        return True

    def _scan(self, **scan_params: Any) -> list[dict[str, Any]]:
        response = self.table.scan(**scan_params)
        items = response.get("Items", [])

        # Handle pagination
        while "LastEvaluatedKey" in response:
            response = self.table.scan(
                ExclusiveStartKey=response["LastEvaluatedKey"], **scan_params
            )
            items.extend(response.get("Items", []))

        logger.info(f"Scanned {len(items)} books from DynamoDB")
        return [item_to_record(item) for item in items]
