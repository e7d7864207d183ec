#!/usr/bin/env python3
"""
Sync asset data from the document store into DuckDB.

Usage:
    python sync_data.py              # Sync all collections, then validate
    python sync_data.py --validate   # Check data integrity only
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb

from app.repositories.db import db_exists
from etl import sync_all, validate_store
from settings import DB_PATH, MAX_CONCURRENT, PAGE_SIZE
from settings.logging import setup_logging

logger = setup_logging(to_file=True)


def run_validation() -> bool:
    """Validate the synced database."""
    if not db_exists():
        print("\n⚠️  No synced data found. Run 'python sync_data.py' first.\n")
        return True

    conn = duckdb.connect(DB_PATH, read_only=True)
    result = validate_store(conn)
    conn.close()

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  Assets: {result['stats']['assets']:,}")
    print(f"  Events: {result['stats']['asset_events']:,}")
    print(f"  Issues: {result['stats']['asset_issues']:,}")
    print(f"  Staff: {result['stats']['staff']:,}")
    print(f"  Unpriced assets: {result['stats']['unpriced_assets']}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Some issues found. Run sync again to fix.")
    print("=" * 60 + "\n")

    return result["valid"]


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    if args:
        print(__doc__)
        sys.exit(1)

    logger.info("Throttling: {} concurrent, {}/page", MAX_CONCURRENT, PAGE_SIZE)
    counts = sync_all(page_size=PAGE_SIZE, max_concurrent=MAX_CONCURRENT)
    logger.info("Synced: {}", counts)

    logger.info("Running validation...")
    run_validation()


if __name__ == "__main__":
    main()
