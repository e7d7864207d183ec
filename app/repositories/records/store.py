"""Record store adapter - generic list-with-filter access to asset records."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import duckdb
from loguru import logger

from app.errors import UpstreamFetchError
from app.repositories.base import BaseRepository
from app.repositories.records.query import COLUMNS, Predicate, RecordKind, compile_predicates


@dataclass
class RecordPage:
    """One page of documents plus the unpaged match count."""

    documents: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0


class RecordStore(BaseRepository):
    """Read-only access to assets, asset events and asset issues."""

    async def list_records(self, kind: RecordKind, predicates: list[Predicate] | None = None) -> RecordPage:
        """List records of a kind matching all predicates."""
        plan = compile_predicates(kind, predicates or [])
        columns = ", ".join(COLUMNS[kind])

        sql = f"SELECT {columns} FROM {kind.value} WHERE {plan.where}"
        if plan.order_by:
            sql += f" ORDER BY {plan.order_by}"
        if plan.limit is not None:
            sql += f" LIMIT {plan.limit}"
        if plan.offset:
            sql += f" OFFSET {plan.offset}"
        count_sql = f"SELECT COUNT(*) FROM {kind.value} WHERE {plan.where}"

        try:
            page = await asyncio.to_thread(self._run, sql, count_sql, plan.params)
        except duckdb.Error as e:
            logger.error("list_records({}) failed: {}", kind, e)
            raise UpstreamFetchError(f"Failed to list {kind.value} records") from e

        logger.debug("list_records({}): {} of {} documents", kind, len(page.documents), page.total)
        return page

    def _run(self, sql: str, count_sql: str, params: list) -> RecordPage:
        cur = self.cursor()
        try:
            result = cur.execute(sql, params)
            names = [d[0] for d in result.description]
            documents = [dict(zip(names, row)) for row in result.fetchall()]
            total = cur.execute(count_sql, params).fetchone()[0]
        finally:
            cur.close()
        return RecordPage(documents=documents, total=int(total))
