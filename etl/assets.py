"""Assets ETL - sync assets, asset events, asset issues and staff."""

import duckdb
import polars as pl
from loguru import logger

from etl.helpers import replace_table
from store_client.documents import (
    AssetDocument,
    AssetEventDocument,
    AssetIssueDocument,
    StaffDocument,
)

# Column order matches the table DDL
ASSET_SCHEMA = {
    "id": pl.Utf8,
    "name": pl.Utf8,
    "category": pl.Utf8,
    "department": pl.Utf8,
    "purchase_price": pl.Float64,
    "purchase_date": pl.Datetime("us"),
    "available_status": pl.Utf8,
    "current_condition": pl.Utf8,
    "last_used_at": pl.Datetime("us"),
    "created_at": pl.Datetime("us"),
}

ASSET_EVENT_SCHEMA = {
    "id": pl.Utf8,
    "asset_id": pl.Utf8,
    "event_type": pl.Utf8,
    "from_value": pl.Utf8,
    "to_value": pl.Utf8,
    "at": pl.Datetime("us"),
}

ASSET_ISSUE_SCHEMA = {
    "id": pl.Utf8,
    "asset_id": pl.Utf8,
    "issue_type": pl.Utf8,
    "reported_at": pl.Datetime("us"),
    "resolved_at": pl.Datetime("us"),
}

STAFF_SCHEMA = {
    "id": pl.Utf8,
    "name": pl.Utf8,
    "email": pl.Utf8,
    "roles": pl.List(pl.Utf8),
    "active": pl.Boolean,
}


def _frame(documents: list[dict], schema_cls, columns: dict) -> pl.DataFrame:
    rows = [schema_cls.model_validate(d).model_dump() for d in documents]
    return pl.DataFrame(rows, schema=columns)


def load_assets(conn: duckdb.DuckDBPyConnection, documents: list[dict]) -> int:
    """Replace the asset table with store documents."""
    df = _frame(documents, AssetDocument, ASSET_SCHEMA)
    replace_table(conn, "asset", df)
    logger.info("Assets: {}", df.height)
    return df.height


def load_asset_events(conn: duckdb.DuckDBPyConnection, documents: list[dict]) -> int:
    """Replace the asset_event table with store documents."""
    df = _frame(documents, AssetEventDocument, ASSET_EVENT_SCHEMA)
    replace_table(conn, "asset_event", df)
    logger.info("Asset events: {}", df.height)
    return df.height


def load_asset_issues(conn: duckdb.DuckDBPyConnection, documents: list[dict]) -> int:
    """Replace the asset_issue table with store documents."""
    df = _frame(documents, AssetIssueDocument, ASSET_ISSUE_SCHEMA)
    replace_table(conn, "asset_issue", df)
    logger.info("Asset issues: {}", df.height)
    return df.height


def load_staff(conn: duckdb.DuckDBPyConnection, documents: list[dict]) -> int:
    """Replace the staff table with store documents."""
    df = _frame(documents, StaffDocument, STAFF_SCHEMA)
    replace_table(conn, "staff", df)
    logger.info("Staff: {}", df.height)
    return df.height
