"""
Configuration and AWS client initialization for Book Catalog Lambda handlers

This module provides:
- The DynamoDB service resource and Books table
- Environment variable configuration
- Constants used across handlers and validators
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table

# Constants
BOOKS_RESOURCE = "/books"
ISBN_PATTERN = r"^(?=(?:\D*\d){10}(?:(?:\D*\d){3})?$)[\d-]+$"
MAX_PAGE_COUNT = 2**31 - 1  # 32-bit signed int

# Environment configuration
AWS_REGION = os.environ.get("AWS_REGION", "us-east-2")
DYNAMODB_ENDPOINT_URL = os.environ.get("DYNAMODB_ENDPOINT_URL") or None
BOOKS_TABLE_NAME = os.environ.get("BOOKS_TABLE")
CREATE_BOOKS_TABLE = os.environ.get("CREATE_BOOKS_TABLE", "false").lower() == "true"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Initialize AWS resource with type hints
dynamodb: "DynamoDBServiceResource" = boto3.resource(
    "dynamodb",
    region_name=AWS_REGION,
    endpoint_url=DYNAMODB_ENDPOINT_URL,
    config=Config(retries={"mode": "standard"}),
)

# Initialize DynamoDB table
# For type checking: treat as non-None (tests will mock it)
# For production: Lambda environment must have BOOKS_TABLE set
if BOOKS_TABLE_NAME:
    books_table: "Table" = dynamodb.Table(BOOKS_TABLE_NAME)
else:
    books_table = None  # type: ignore[assignment]
