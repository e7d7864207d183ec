"""Predictive calculator - maintenance scheduling, end-of-life and utilization forecast."""

import asyncio
import math
from collections import defaultdict
from datetime import datetime, timedelta

from loguru import logger

from app.models.analytics import AnalyticsQuery, GroupBy
from app.models.assets import AvailableStatus
from app.repositories.records import Query, RecordKind
from app.services.analytics import formulas
from app.services.analytics.base import BaseCalculator
from app.services.analytics.utilization import in_use_series
from settings import EVENT_LIMIT, ISSUE_LIMIT

DEFAULT_INTERVAL_DAYS = 90
DEFAULT_DURATION_HOURS = 4
DUE_HORIZON_DAYS = 30
EOL_HORIZON_YEARS = 3
FORECAST_MONTHS = 6


def _by_asset(records: list[dict]) -> dict[str, list[dict]]:
    grouped: dict[str, list[dict]] = defaultdict(list)
    for r in records:
        grouped[r.get("asset_id")].append(r)
    return grouped


# ========== Maintenance ==========


def maintenance_times(events: list[dict]) -> list[datetime]:
    """Instants an asset entered maintenance, oldest first."""
    return sorted(formulas.to_datetime(e["at"]) for e in events if e.get("to_value") == AvailableStatus.MAINTENANCE)


def maintenance_interval(times: list[datetime]) -> int:
    """Mean days between maintenance visits, default 90 with fewer than two."""
    gap = formulas.mean_gap(times)
    if gap is None:
        return DEFAULT_INTERVAL_DAYS
    return formulas.round_half_up(gap / formulas.DAY)


def estimate_duration(issues: list[dict]) -> int:
    """Mean resolution hours of resolved issues, default 4."""
    durations = [
        (formulas.to_datetime(i["resolved_at"]) - formulas.to_datetime(i["reported_at"])) / formulas.HOUR
        for i in issues
        if i.get("resolved_at")
    ]
    if not durations:
        return DEFAULT_DURATION_HOURS
    return formulas.round_half_up(formulas.mean(durations))


def maintenance_priority(days_until_due: int) -> str:
    if days_until_due <= 0:
        return "Overdue"
    if days_until_due <= 7:
        return "High"
    return "Medium"


def maintenance_schedule(assets: list[dict], events: list[dict], issues: list[dict], now: datetime) -> list[dict]:
    """Assets due for maintenance within 30 days (overdue included), soonest first."""
    events_by_asset = _by_asset(events)
    issues_by_asset = _by_asset(issues)

    predictions = []
    for a in assets:
        times = maintenance_times(events_by_asset.get(a["id"], []))
        if not times:
            continue

        interval = maintenance_interval(times)
        next_due = times[-1] + timedelta(days=interval)
        days_until_due = math.ceil((next_due - now) / formulas.DAY)
        if days_until_due > DUE_HORIZON_DAYS:
            continue

        predictions.append(
            {
                "assetId": a["id"],
                "assetName": a.get("name"),
                "lastMaintenanceDate": times[-1].isoformat(),
                "maintenanceIntervalDays": interval,
                "nextMaintenanceDate": next_due.isoformat(),
                "daysUntilDue": days_until_due,
                "priority": maintenance_priority(days_until_due),
                "estimatedDuration": estimate_duration(issues_by_asset.get(a["id"], [])),
            }
        )

    return sorted(predictions, key=lambda p: p["daysUntilDue"])


# ========== Lifecycle ==========


def remaining_life(asset: dict, now: datetime) -> tuple[int, int, float]:
    """(age, expected lifespan, condition-adjusted remaining years)."""
    age = formulas.asset_age(asset.get("purchase_date"), now)
    lifespan = formulas.expected_lifespan(asset.get("category"))
    remaining = max(0, lifespan - age) * formulas.condition_factor(asset.get("current_condition"))
    return age, lifespan, remaining


def lifecycle_recommendation(remaining_years: float) -> str:
    if remaining_years < 1:
        return "Consider replacement"
    if remaining_years < 2:
        return "Plan for replacement"
    return "Monitor condition"


def lifecycle_analysis(assets: list[dict], now: datetime) -> list[dict]:
    """Assets with less than three years of adjusted remaining life."""
    result = []
    for a in assets:
        age, lifespan, remaining = remaining_life(a, now)
        remaining_years = round(remaining, 1)
        if remaining_years >= EOL_HORIZON_YEARS:
            continue
        result.append(
            {
                "assetId": a["id"],
                "assetName": a.get("name"),
                "currentAge": age,
                "expectedLifespan": lifespan,
                "remainingYears": remaining_years,
                "endOfLifeDate": (now + remaining * formulas.YEAR).isoformat(),
                "recommendation": lifecycle_recommendation(remaining_years),
            }
        )
    return result


# ========== Utilization forecast ==========


def utilization_forecast(assets: list[dict], events: list[dict], now: datetime) -> list[dict]:
    """Six monthly utilization projections from the historical monthly trend."""
    history = in_use_series(events, len(assets), GroupBy.MONTH)
    projected = formulas.project([p["utilization"] for p in history], FORECAST_MONTHS)

    return [
        {
            "month": formulas.add_months(now, i + 1).strftime("%Y-%m"),
            "predictedUtilization": formulas.round2(min(100.0, max(0.0, value))),
        }
        for i, value in enumerate(projected)
    ]


def recommendations(schedule: list[dict], lifecycle: list[dict]) -> list[dict]:
    result = []

    overdue = sum(1 for p in schedule if p["priority"] == "Overdue")
    if overdue:
        result.append(
            {
                "type": "maintenance",
                "priority": "critical",
                "message": f"{overdue} assets have overdue maintenance",
                "action": "Schedule immediate maintenance",
            }
        )

    replace = sum(1 for p in lifecycle if p["recommendation"] == "Consider replacement")
    if replace:
        result.append(
            {
                "type": "lifecycle",
                "priority": "high",
                "message": f"{replace} assets are nearing end of life",
                "action": "Plan replacement budget and procurement",
            }
        )

    return result


def predictive_report(assets: list[dict], events: list[dict], issues: list[dict], now: datetime) -> dict:
    asset_ids = {a["id"] for a in assets}
    events = [e for e in events if e.get("asset_id") in asset_ids]
    issues = [i for i in issues if i.get("asset_id") in asset_ids]

    schedule = maintenance_schedule(assets, events, issues, now)
    lifecycle = lifecycle_analysis(assets, now)
    return {
        "maintenanceSchedule": schedule,
        "lifecycleAnalysis": lifecycle,
        "utilizationForecast": utilization_forecast(assets, events, now),
        "recommendations": recommendations(schedule, lifecycle),
    }


class PredictiveCalculator(BaseCalculator):
    """Forward-looking maintenance, lifecycle and utilization estimates."""

    name = "predictive"

    async def calculate(self, query: AnalyticsQuery) -> dict:
        now = self._clock()

        assets, events, issues = await asyncio.gather(
            self._assets(query),
            self._store.list_records(RecordKind.ASSET_EVENTS, [Query.order_desc("at"), Query.limit(EVENT_LIMIT)]),
            self._store.list_records(
                RecordKind.ASSET_ISSUES, [Query.order_desc("reported_at"), Query.limit(ISSUE_LIMIT)]
            ),
        )

        result = predictive_report(assets, events.documents, issues.documents, now)
        logger.info(
            "Computed predictions: {} due for maintenance, {} nearing end of life",
            len(result["maintenanceSchedule"]),
            len(result["lifecycleAnalysis"]),
        )
        return result
