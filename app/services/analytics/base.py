"""Shared plumbing for metric calculators."""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from app.models.analytics import AnalyticsQuery, DateRange
from app.repositories.records import Query, RecordKind, RecordStore
from app.services.analytics.formulas import utc_now
from settings import ASSET_LIMIT


def serialize(record: dict[str, Any]) -> dict[str, Any]:
    """Record with instants rendered as ISO-8601 strings."""
    return {k: v.isoformat() if isinstance(v, datetime) else v for k, v in record.items()}


def in_scope(records: list[dict], asset_ids: set[str] | None) -> list[dict]:
    """Records belonging to the given assets; all records when unscoped."""
    if asset_ids is None:
        return records
    return [r for r in records if r.get("asset_id") in asset_ids]


class BaseCalculator:
    """Stateless calculator over the record store."""

    name = "base"

    def __init__(self, store: RecordStore, clock: Callable[[], datetime] = utc_now):
        self._store = store
        self._clock = clock

    async def calculate(self, query: AnalyticsQuery) -> dict:
        raise NotImplementedError

    @staticmethod
    def _window(query: AnalyticsQuery, lookback_days: int, now: datetime) -> DateRange:
        """Query date range, or a trailing lookback ending now."""
        if query.date_range is not None:
            return query.date_range
        return DateRange(start=now - timedelta(days=lookback_days), end=now)

    async def _assets(self, query: AnalyticsQuery) -> list[dict]:
        """Assets matching department/category (date range not applied)."""
        predicates = []
        if query.department:
            predicates.append(Query.equal("department", query.department))
        if query.category:
            predicates.append(Query.equal("category", query.category))
        page = await self._store.list_records(RecordKind.ASSETS, [*predicates, Query.limit(ASSET_LIMIT)])
        return page.documents

    async def _scope(self, query: AnalyticsQuery) -> set[str] | None:
        """Ids of assets matching department/category, None when unfiltered."""
        if not (query.department or query.category):
            return None
        return {a["id"] for a in await self._assets(query)}
