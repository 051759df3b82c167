#!/usr/bin/env python3
"""
Create the DynamoDB Books table used by the catalog API.

Safe to run repeatedly: an existing table is left untouched. The script
waits until the table is ACTIVE before exiting.

Usage:
    python scripts/create-books-table.py [--table Books] [--profile PROFILE]
        [--region us-east-2] [--endpoint-url http://localhost:8000]
"""

import argparse
import sys

import boto3

from catalog_backend.db.schema import ensure_books_table


def main():
    parser = argparse.ArgumentParser(description="Create the DynamoDB Books table")
    parser.add_argument("--table", default="Books", help="Table name (default: Books)")
    parser.add_argument("--profile", type=str, help="AWS profile name to use")
    parser.add_argument("--region", default="us-east-2", help="AWS region (default: us-east-2)")
    parser.add_argument(
        "--endpoint-url",
        type=str,
        help="Alternate DynamoDB endpoint, e.g. DynamoDB Local",
    )

    args = parser.parse_args()

    session = boto3.Session(profile_name=args.profile) if args.profile else boto3.Session()
    dynamodb = session.resource(
        "dynamodb", region_name=args.region, endpoint_url=args.endpoint_url
    )

    print(f"📊 Ensuring DynamoDB table: {args.table}")
    print(f"🌎 Using AWS Region: {args.region}")
    if args.endpoint_url:
        print(f"🔌 Using endpoint: {args.endpoint_url}")

    try:
        table = ensure_books_table(dynamodb, args.table)
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n❌ Failed to create table: {e}")
        sys.exit(1)

    print(f"✅ Table {table.name} is ready ({table.table_status})")


if __name__ == "__main__":
    main()
