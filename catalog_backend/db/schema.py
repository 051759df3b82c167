"""
Books table schema and initialization

The catalog keeps one DynamoDB table keyed by ISBN. ensure_books_table()
creates it on first use and blocks until it is ACTIVE, so it is safe to call
on every cold start.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botocore.exceptions import ClientError

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table

logger = logging.getLogger()

BOOKS_KEY_SCHEMA = [{"AttributeName": "isbn", "KeyType": "HASH"}]
BOOKS_ATTRIBUTE_DEFINITIONS = [{"AttributeName": "isbn", "AttributeType": "S"}]


def ensure_books_table(dynamodb: "DynamoDBServiceResource", table_name: str) -> "Table":
    """
    Create the Books table if it does not exist and wait until it is usable.

    Args:
        dynamodb: boto3 DynamoDB service resource
        table_name: Name of the Books table

    Returns:
        Table: Handle to the (now existing) table

    Raises:
        ClientError: For any failure other than the table already existing
    """
    try:
        table = dynamodb.create_table(
            TableName=table_name,
            KeySchema=BOOKS_KEY_SCHEMA,  # type: ignore[arg-type]
            AttributeDefinitions=BOOKS_ATTRIBUTE_DEFINITIONS,  # type: ignore[arg-type]
            BillingMode="PAY_PER_REQUEST",
        )
        logger.info(f"Creating DynamoDB table: {table_name}")
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceInUseException":  # type: ignore[typeddict-item]
            raise
        logger.info(f"DynamoDB table already exists: {table_name}")
        table = dynamodb.Table(table_name)

    table.wait_until_exists()
    logger.info(f"DynamoDB table ready: {table_name}")
    return table
