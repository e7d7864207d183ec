"""Utilization calculator."""

import asyncio
from collections.abc import Iterable
from datetime import datetime, timedelta

from loguru import logger

from app.models.analytics import AnalyticsQuery, GroupBy
from app.models.assets import AvailableStatus, EventType
from app.repositories.records import Query, RecordKind
from app.services.analytics import formulas
from app.services.analytics.base import BaseCalculator
from settings import EVENT_LIMIT

UNDERUSED_AFTER = timedelta(days=30)


def in_use_delta(event: dict) -> int:
    """+1 when an asset enters IN_USE, -1 when it leaves, else 0."""
    entering = event.get("to_value") == AvailableStatus.IN_USE
    leaving = event.get("from_value") == AvailableStatus.IN_USE
    if entering and not leaving:
        return 1
    if leaving and not entering:
        return -1
    return 0


def in_use_series(events: Iterable[dict], total: int, group_by: GroupBy, start: int = 0) -> list[dict]:
    """End-of-period in-use count and utilization for every period with status changes."""
    status_events = [e for e in events if e.get("event_type") == EventType.STATUS_CHANGED]
    status_events.sort(key=lambda e: formulas.to_datetime(e["at"]))

    counter = start
    periods: dict[str, int] = {}
    for e in status_events:
        counter = min(max(counter + in_use_delta(e), 0), total)
        periods[formulas.period_key(formulas.to_datetime(e["at"]), group_by)] = counter

    return [
        {
            "period": period,
            "utilization": formulas.round2(formulas.percent(in_use, total)),
            "inUse": in_use,
            "totalAssets": total,
        }
        for period, in_use in periods.items()
    ]


def starting_in_use(assets: list[dict], events: list[dict]) -> int:
    """In-use count before the first event, rewound from current statuses.

    ``events`` must run up to the present; a status change missing from it
    would shift the baseline of every period.
    """
    current = sum(1 for a in assets if a.get("available_status") == AvailableStatus.IN_USE)
    net = sum(in_use_delta(e) for e in events if e.get("event_type") == EventType.STATUS_CHANGED)
    return min(max(current - net, 0), len(assets))


def average_utilization(series: list[dict]) -> float:
    return formulas.round2(formulas.mean([p["utilization"] for p in series]))


def peak_utilization(series: list[dict]) -> dict:
    """Highest period, first occurrence wins."""
    peak = {"value": 0, "period": None}
    for p in series:
        if peak["period"] is None or p["utilization"] > peak["value"]:
            peak = {"value": p["utilization"], "period": p["period"]}
    return peak


def underutilized_assets(assets: list[dict], now: datetime) -> list[dict]:
    """Available assets unused for 30+ days (or never used)."""
    cutoff = now - UNDERUSED_AFTER
    result = []
    for a in assets:
        if a.get("available_status") != AvailableStatus.AVAILABLE:
            continue
        last_used = formulas.to_datetime(a.get("last_used_at"))
        if last_used is None or last_used < cutoff:
            result.append(
                {
                    "id": a["id"],
                    "name": a.get("name"),
                    "lastUsed": last_used.isoformat() if last_used else None,
                }
            )
    return result


def utilization_report(
    assets: list[dict],
    events: list[dict],
    group_by: GroupBy,
    now: datetime,
    end: datetime | None = None,
) -> dict:
    """Per-period utilization plus summary.

    ``events`` cover the range start through ``now``; only those up to
    ``end`` produce periods, the rest just rewind the baseline.
    """
    asset_ids = {a["id"] for a in assets}
    events = [e for e in events if e.get("asset_id") in asset_ids]
    in_range = events if end is None else [e for e in events if formulas.to_datetime(e["at"]) <= end]

    series = in_use_series(in_range, len(assets), group_by, start=starting_in_use(assets, events))
    return {
        "utilization": series,
        "summary": {
            "averageUtilization": average_utilization(series),
            "peakUtilization": peak_utilization(series),
            "underutilizedAssets": underutilized_assets(assets, now),
        },
    }


class UtilizationCalculator(BaseCalculator):
    """Utilization over time and underused assets."""

    name = "utilization"

    async def calculate(self, query: AnalyticsQuery) -> dict:
        now = self._clock()
        window = self._window(query, 90, now)

        assets, events = await asyncio.gather(
            self._assets(query),
            self._store.list_records(
                RecordKind.ASSET_EVENTS,
                [
                    Query.equal("event_type", EventType.STATUS_CHANGED.value),
                    Query.greater_than_equal("at", window.start),
                    Query.less_than_equal("at", max(window.end, now)),
                    Query.order_asc("at"),
                    Query.limit(EVENT_LIMIT),
                ],
            ),
        )

        result = utilization_report(assets, events.documents, query.group_by, now, end=window.end)
        logger.info("Computed utilization: {} periods, {} assets", len(result["utilization"]), len(assets))
        return result
