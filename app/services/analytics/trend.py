"""Trend calculator - event volume per period with a linear forecast."""

import asyncio
from collections import defaultdict

from loguru import logger

from app.models.analytics import AnalyticsQuery, GroupBy
from app.repositories.records import Query, RecordKind
from app.services.analytics import formulas
from app.services.analytics.base import BaseCalculator, in_scope, serialize
from settings import EVENT_LIMIT

LOOKBACK_DAYS = 365
FORECAST_PERIODS = 3


def group_events_by_period(events: list[dict], group_by: GroupBy) -> list[dict]:
    """Events bucketed by period label, chronologically."""
    grouped: dict[str, list[dict]] = defaultdict(list)
    for e in sorted(events, key=lambda e: formulas.to_datetime(e["at"])):
        grouped[formulas.period_key(formulas.to_datetime(e["at"]), group_by)].append(e)

    return [
        {"period": period, "eventCount": len(items), "events": [serialize(e) for e in items]}
        for period, items in sorted(grouped.items())
    ]


def trend_indicators(trends: list[dict]) -> dict:
    """Compare mean volume of the first and second half of the periods."""
    if len(trends) < 2:
        return {"trend": "insufficient_data"}

    half = len(trends) // 2
    first_avg = formulas.mean([t["eventCount"] for t in trends[:half]])
    second_avg = formulas.mean([t["eventCount"] for t in trends[half:]])

    if first_avg == 0:
        change = 0.0 if second_avg == 0 else 100.0
    else:
        change = (second_avg - first_avg) / first_avg * 100

    if change > 10:
        trend = "increasing"
    elif change < -10:
        trend = "decreasing"
    else:
        trend = "stable"

    return {
        "trend": trend,
        "percentChange": formulas.round2(change),
        "average": formulas.round2(formulas.mean([t["eventCount"] for t in trends])),
    }


def forecast(counts: list[float], periods: int = FORECAST_PERIODS) -> list[dict]:
    """Linear projection of the next periods; needs at least three points."""
    if len(counts) < 3:
        return []
    return [
        {"period": f"forecast_{i + 1}", "predictedCount": max(0, formulas.round_half_up(value))}
        for i, value in enumerate(formulas.project(counts, periods))
    ]


def trend_report(events: list[dict], group_by: GroupBy) -> dict:
    trends = group_events_by_period(events, group_by)
    return {
        "trends": trends,
        "indicators": trend_indicators(trends),
        "forecast": forecast([t["eventCount"] for t in trends]),
    }


class TrendCalculator(BaseCalculator):
    """Event volume trends."""

    name = "trend"

    async def calculate(self, query: AnalyticsQuery) -> dict:
        window = self._window(query, LOOKBACK_DAYS, self._clock())

        scope, events = await asyncio.gather(
            self._scope(query),
            self._store.list_records(
                RecordKind.ASSET_EVENTS,
                [
                    Query.greater_than_equal("at", window.start),
                    Query.less_than_equal("at", window.end),
                    Query.order_asc("at"),
                    Query.limit(EVENT_LIMIT),
                ],
            ),
        )

        result = trend_report(in_scope(events.documents, scope), query.group_by)
        logger.info("Computed trends: {} periods ({})", len(result["trends"]), query.group_by)
        return result
