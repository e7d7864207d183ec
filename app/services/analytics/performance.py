"""Performance calculator - MTBF, MTTR and availability."""

import asyncio

from loguru import logger

from app.models.analytics import AnalyticsQuery
from app.models.assets import BREAKDOWN, AvailableStatus, EventType
from app.repositories.records import Query, RecordKind
from app.services.analytics import formulas
from app.services.analytics.base import BaseCalculator, in_scope
from settings import EVENT_LIMIT, ISSUE_LIMIT

LOOKBACK_DAYS = 180


def mtbf_days(issues: list[dict]) -> float | None:
    """Mean days between consecutive issue reports; None (infinite) for fewer than two."""
    gap = formulas.mean_gap([formulas.to_datetime(i["reported_at"]) for i in issues])
    if gap is None:
        return None
    return gap / formulas.DAY


def mttr_hours(issues: list[dict]) -> float:
    """Mean report-to-resolution hours over resolved issues, 0 when none."""
    durations = [
        (formulas.to_datetime(i["resolved_at"]) - formulas.to_datetime(i["reported_at"])) / formulas.HOUR
        for i in issues
        if i.get("resolved_at")
    ]
    return formulas.mean(durations)


def failure_rate(issues: list[dict]) -> float:
    """Issues per calendar month with at least one issue."""
    months = {formulas.to_datetime(i["reported_at"]).strftime("%Y-%m") for i in issues}
    if not months:
        return 0.0
    return formulas.round2(len(issues) / len(months))


def maintenance_efficiency(issues: list[dict], events: list[dict]) -> dict:
    """Preventive maintenance events per corrective breakdown."""
    preventive = sum(1 for e in events if e.get("to_value") == AvailableStatus.MAINTENANCE)
    corrective = sum(1 for i in issues if i.get("issue_type") == BREAKDOWN)
    ratio = preventive / max(corrective, 1)
    return {
        "preventiveRatio": formulas.round2(ratio),
        "efficiency": formulas.efficiency_label(ratio),
    }


def performance_report(issues: list[dict], events: list[dict]) -> dict:
    mtbf = mtbf_days(issues)
    mttr = mttr_hours(issues)
    availability = formulas.round2(formulas.availability(mtbf, mttr))

    return {
        "mtbf": {
            "value": formulas.round2(mtbf) if mtbf is not None else None,
            "unit": "days",
            "interpretation": formulas.interpret_mtbf(mtbf),
        },
        "mttr": {
            "value": formulas.round2(mttr),
            "unit": "hours",
            "interpretation": formulas.interpret_mttr(mttr),
        },
        "availability": {
            "percentage": availability,
            "rating": formulas.availability_rating(availability),
        },
        "failureRate": failure_rate(issues),
        "maintenanceEfficiency": maintenance_efficiency(issues, events),
    }


class PerformanceCalculator(BaseCalculator):
    """Reliability metrics over reported issues."""

    name = "performance"

    async def calculate(self, query: AnalyticsQuery) -> dict:
        window = self._window(query, LOOKBACK_DAYS, self._clock())

        scope, issues, events = await asyncio.gather(
            self._scope(query),
            self._store.list_records(
                RecordKind.ASSET_ISSUES,
                [
                    Query.greater_than_equal("reported_at", window.start),
                    Query.less_than_equal("reported_at", window.end),
                    Query.limit(ISSUE_LIMIT),
                ],
            ),
            self._store.list_records(
                RecordKind.ASSET_EVENTS,
                [
                    Query.equal("event_type", EventType.STATUS_CHANGED.value),
                    Query.greater_than_equal("at", window.start),
                    Query.less_than_equal("at", window.end),
                    Query.limit(EVENT_LIMIT),
                ],
            ),
        )

        issue_docs = in_scope(issues.documents, scope)
        result = performance_report(issue_docs, in_scope(events.documents, scope))
        logger.info("Computed performance over {} issues", len(issue_docs))
        return result
