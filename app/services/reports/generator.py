"""Custom report generator - ad-hoc metrics over filtered assets."""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.models.analytics import ReportConfig
from app.repositories.records import Query, RecordKind, RecordStore
from app.services.analytics import formulas
from settings import ASSET_LIMIT

# API field names accepted in groupBy, mapped to record columns
FIELD_ALIASES = {
    "$id": "id",
    "purchasePrice": "purchase_price",
    "purchaseDate": "purchase_date",
    "availableStatus": "available_status",
    "currentCondition": "current_condition",
    "lastUsedAt": "last_used_at",
    "createdAt": "created_at",
    "$createdAt": "created_at",
}


def calculate_metric(assets: list[dict], metric: str, now: datetime) -> float | int | None:
    """Known metrics: count, totalValue, averageAge. Others yield None."""
    match metric:
        case "count":
            return len(assets)
        case "totalValue":
            return formulas.round2(sum(float(a.get("purchase_price") or 0) for a in assets))
        case "averageAge":
            return formulas.round2(formulas.mean([formulas.asset_age(a.get("purchase_date"), now) for a in assets]))
        case _:
            return None


def group_key(asset: dict, fields: list[str]) -> str:
    """Underscore-joined field values; missing values become 'unknown'."""
    parts = []
    for f in fields:
        value = asset.get(FIELD_ALIASES.get(f, f))
        parts.append("unknown" if value is None or value == "" else str(value))
    return "_".join(parts)


def report_data(assets: list[dict], metrics: list[str], group_by: list[str], now: datetime) -> dict:
    results: dict = {m: calculate_metric(assets, m, now) for m in metrics}

    if group_by:
        groups: dict[str, list[dict]] = {}
        for a in assets:
            groups.setdefault(group_key(a, group_by), []).append(a)
        results["grouped"] = {
            key: {m: calculate_metric(items, m, now) for m in metrics} for key, items in groups.items()
        }

    return results


class ReportGenerator:
    """Builds custom reports from a validated configuration."""

    def __init__(self, store: RecordStore, clock: Callable[[], datetime] = formulas.utc_now):
        self._store = store
        self._clock = clock

    async def generate(self, config: ReportConfig) -> dict:
        filters = config.filters
        predicates = []
        if filters.departments:
            predicates.append(Query.equal("department", filters.departments))
        if filters.categories:
            predicates.append(Query.equal("category", filters.categories))
        if filters.statuses:
            predicates.append(Query.equal("available_status", filters.statuses))
        predicates += [
            Query.greater_than_equal("created_at", filters.date_range.start),
            Query.less_than_equal("created_at", filters.date_range.end),
            Query.limit(ASSET_LIMIT),
        ]

        page = await self._store.list_records(RecordKind.ASSETS, predicates)
        now = self._clock()
        logger.info("Generating report '{}' over {} assets", config.name, len(page.documents))
        logger.debug("Report config: {}", config.to_dict())

        return {
            "name": config.name,
            "description": config.description,
            "data": report_data(page.documents, config.metrics, config.group_by, now),
            "generatedAt": now.isoformat(),
        }
