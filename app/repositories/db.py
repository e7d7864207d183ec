"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

REQUIRED_TABLES = ("asset", "asset_event", "asset_issue", "staff")

_local = threading.local()


def db_exists() -> bool:
    """Check if database file exists."""
    return Path(DB_PATH).exists()


def missing_tables(conn: duckdb.DuckDBPyConnection) -> list[str]:
    """Required tables not present in the database."""
    present = {r[0] for r in conn.execute("SELECT table_name FROM information_schema.tables").fetchall()}
    return [t for t in REQUIRED_TABLES if t not in present]


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create missing tables and indexes (DDL is IF NOT EXISTS, so partial schemas are completed)."""
    missing = missing_tables(conn)
    if not missing:
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized: {}", ", ".join(missing))


def _ensure_db() -> None:
    """Create the DB file with its tables, or complete an older schema."""
    conn = duckdb.connect(DB_PATH)
    try:
        init_tables(conn)
    finally:
        conn.close()


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    conn = getattr(_local, "conn", None)
    if conn is None:
        if not db_exists():
            logger.warning("DB not found: {}. Creating empty DB.", DB_PATH)
        _ensure_db()
        conn = _local.conn = duckdb.connect(DB_PATH, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
    return conn


def close_db() -> None:
    """Close thread-local connection."""
    conn = getattr(_local, "conn", None)
    if conn is not None:
        conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Get a writable connection (for ETL operations)."""
    conn = duckdb.connect(DB_PATH)
    init_tables(conn)
    return conn
