"""
DynamoDB utilities for the Book Catalog API

Provides the conditional overwrite used by updates and helpers for turning
stored items back into plain records.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from botocore.exceptions import ClientError


def build_overwrite_params(key: dict[str, Any], fields: dict[str, Any]) -> dict[str, Any]:
    """
    Build update_item parameters that overwrite the attributes of an existing item.

    None values REMOVE the attribute. The update is conditional on the key
    existing, so a missing item fails with ConditionalCheckFailedException
    instead of being created.

    Args:
        key: Primary key of the item, e.g. {"isbn": "978-0137081073"}
        fields: Every non-key attribute and its new value

    Returns:
        dict: Parameters for table.update_item()

    Example:
        build_overwrite_params({"isbn": "1234567890"}, {"title": "Clean Code", "releaseDate": None})
        # UpdateExpression = "SET #title = :title REMOVE #releaseDate"
        # ConditionExpression = "attribute_exists(isbn)"
    """
    set_parts = []
    remove_parts = []
    names: dict[str, str] = {}
    values: dict[str, Any] = {}

    for field, value in fields.items():
        names[f"#{field}"] = field
        if value is None:
            remove_parts.append(f"#{field}")
        else:
            set_parts.append(f"#{field} = :{field}")
            values[f":{field}"] = value

    clauses = []
    if set_parts:
        clauses.append("SET " + ", ".join(set_parts))
    if remove_parts:
        clauses.append("REMOVE " + ", ".join(remove_parts))

    (key_name,) = key
    params = {
        "Key": key,
        "UpdateExpression": " ".join(clauses),
        "ExpressionAttributeNames": names,
        "ConditionExpression": f"attribute_exists({key_name})",
    }
    # REMOVE-only updates have no values
    if values:
        params["ExpressionAttributeValues"] = values
    return params


def convert_decimal(value: Any) -> Any:
    """
    Convert Decimal types (from DynamoDB) to int or float.

    Args:
        value: Value that might be a Decimal

    Returns:
        Converted value (int if whole number, float otherwise, else unchanged)
    """
    if isinstance(value, Decimal):
        return int(value) if value % 1 == 0 else float(value)
    return value


def item_to_record(item: dict) -> dict:
    """Convert a DynamoDB item into a plain record with native numbers."""
    return {name: convert_decimal(value) for name, value in item.items()}


def is_conditional_check_failure(error: ClientError) -> bool:
    """True when a conditional write was rejected by its ConditionExpression."""
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"
