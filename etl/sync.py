"""Main sync orchestration."""

import asyncio

import duckdb
from loguru import logger

from app.repositories.db import get_write_connection
from etl.assets import load_asset_events, load_asset_issues, load_assets, load_staff
from etl.validation import validate_store
from settings import MAX_CONCURRENT, PAGE_SIZE, STORE_COLLECTIONS
from store_client.documents import DocumentsClient


async def sync_store(
    conn: duckdb.DuckDBPyConnection,
    client: DocumentsClient,
    page_size: int = PAGE_SIZE,
) -> dict[str, int]:
    """Pull every collection, then replace the local tables."""
    assets, events, issues, staff = await asyncio.gather(
        client.list_documents(STORE_COLLECTIONS["assets"], page_size),
        client.list_documents(STORE_COLLECTIONS["asset_events"], page_size),
        client.list_documents(STORE_COLLECTIONS["asset_issues"], page_size),
        client.list_documents(STORE_COLLECTIONS["staff"], page_size),
    )

    counts = {
        "assets": load_assets(conn, assets),
        "asset_events": load_asset_events(conn, events),
        "asset_issues": load_asset_issues(conn, issues),
        "staff": load_staff(conn, staff),
    }

    result = validate_store(conn)
    if result["valid"]:
        logger.info("Validation OK: {}", result["stats"])
    else:
        logger.warning("Validation issues: {}", result["issues"])
    return counts


async def _sync_async(page_size: int, max_concurrent: int) -> dict[str, int]:
    """Async sync implementation."""
    conn = get_write_connection()
    try:
        async with DocumentsClient(max_concurrent=max_concurrent) as client:
            counts = await sync_store(conn, client, page_size)
    finally:
        conn.close()

    logger.info("Sync complete!")
    return counts


def sync_all(page_size: int = PAGE_SIZE, max_concurrent: int = MAX_CONCURRENT) -> dict[str, int]:
    """Main sync entry point."""
    return asyncio.run(_sync_async(page_size, max_concurrent))
