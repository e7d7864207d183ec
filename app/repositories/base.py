"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository over a shared connection.

    Queries run on a fresh cursor each, so repositories are safe to call
    from worker threads.
    """

    def __init__(self, read_only: bool = True, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db(read_only)
        logger.debug("{} initialized", self.__class__.__name__)

    def cursor(self) -> duckdb.DuckDBPyConnection:
        """Separate cursor for use from a worker thread."""
        return self._db.cursor()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        cur = self.cursor()
        try:
            return cur.execute(query, params or []).fetchone()
        finally:
            cur.close()
