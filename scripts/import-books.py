#!/usr/bin/env python3
"""
Bulk-import books into the catalog from a JSON file.

The file must hold a JSON array of book objects using the API's field names
(isbn, title, author, shortDescription, pageCount, releaseDate). Each book
goes through the same checks as POST /books: payload shape, field rules,
then a conditional insert that skips ISBNs already in the table.

Usage:
    python scripts/import-books.py books.json [--dry-run] [--table Books]
        [--profile PROFILE] [--region us-east-2] [--endpoint-url URL]
"""

import argparse
import json
import sys
from pathlib import Path

import boto3

from catalog_backend.db.book_repository import BookRepository
from catalog_backend.services.book_service import BookService
from catalog_backend.utils.validation import parse_book_body, validate_book


def _error_message(error_response: dict) -> str:
    return json.loads(error_response["body"])["message"]


def import_books(
    books_file: Path,
    service: BookService | None,
    dry_run: bool = False,
) -> dict[str, int]:
    """
    Import every book in books_file through the catalog service.

    Args:
        books_file: Path to a JSON array of books
        service: Catalog service to write through (unused when dry_run)
        dry_run: Only parse and validate, never write

    Returns:
        dict: Counts for "imported", "skipped" and "invalid"
    """
    with books_file.open("r", encoding="utf-8") as f:
        entries = json.load(f)

    if not isinstance(entries, list):
        raise ValueError(f"{books_file} must contain a JSON array of books")

    print(f"📚 Found {len(entries)} books in {books_file}")
    if dry_run:
        print("🔍 DRY RUN MODE - No changes will be made")
    print()

    counts = {"imported": 0, "skipped": 0, "invalid": 0}

    for i, entry in enumerate(entries, 1):
        label = entry.get("isbn") if isinstance(entry, dict) else None
        print(f"[{i}/{len(entries)}] {label or '<no isbn>'}")

        book, error = parse_book_body(entry)
        if error:
            print(f"  ❌ Invalid payload: {_error_message(error)}")
            counts["invalid"] += 1
            continue

        failures = validate_book(book)
        if failures:
            for failure in failures:
                print(f"  ❌ {failure['propertyName']}: {failure['errorMessage']}")
            counts["invalid"] += 1
            continue

        if dry_run:
            print(f"  → Would import: {book['title']}")
            counts["imported"] += 1
            continue

        if service.create(book):  # type: ignore[union-attr]
            print(f"  ✅ Imported: {book['title']}")
            counts["imported"] += 1
        else:
            print("  ⏭️  Skipping (already exists)")
            counts["skipped"] += 1

    print()
    print("=" * 60)
    print("📊 Import Summary:")
    print(f"   Imported: {counts['imported']}")
    print(f"   Skipped (already in table): {counts['skipped']}")
    print(f"   Invalid: {counts['invalid']}")
    print("=" * 60)

    if dry_run:
        print()
        print("💡 Run without --dry-run to apply changes")

    return counts


def main():
    parser = argparse.ArgumentParser(description="Import books into the DynamoDB Books table")
    parser.add_argument("books_file", type=Path, help="JSON file with an array of books")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate books without writing them",
    )
    parser.add_argument("--table", default="Books", help="Table name (default: Books)")
    parser.add_argument("--profile", type=str, help="AWS profile name to use")
    parser.add_argument("--region", default="us-east-2", help="AWS region (default: us-east-2)")
    parser.add_argument("--endpoint-url", type=str, help="Alternate DynamoDB endpoint")

    args = parser.parse_args()

    service = None
    if not args.dry_run:
        session = boto3.Session(profile_name=args.profile) if args.profile else boto3.Session()
        dynamodb = session.resource(
            "dynamodb", region_name=args.region, endpoint_url=args.endpoint_url
        )
        service = BookService(BookRepository(dynamodb.Table(args.table)))

    try:
        counts = import_books(args.books_file, service, dry_run=args.dry_run)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\n❌ Error: {e}")
        sys.exit(1)

    if counts["invalid"]:
        sys.exit(2)


if __name__ == "__main__":
    main()
