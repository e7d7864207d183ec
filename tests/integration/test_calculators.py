"""Calculators against the seeded record store."""

from datetime import datetime

import pytest

from app.models.analytics import AnalyticsQuery, AnalyticsType, DateRange, GroupBy, ReportConfig, ReportFilters
from app.services.analytics import (
    CostCalculator,
    PerformanceCalculator,
    PredictiveCalculator,
    TrendCalculator,
    UtilizationCalculator,
)
from app.services.reports import ReportGenerator

RANGE = DateRange(start=datetime(2024, 1, 1), end=datetime(2024, 6, 30))


def query(analytics_type: AnalyticsType, **kw) -> AnalyticsQuery:
    return AnalyticsQuery(type=analytics_type, date_range=RANGE, **kw)


@pytest.fixture
def clock(now):
    return lambda: now


class TestUtilization:
    async def test_series(self, store, clock):
        result = await UtilizationCalculator(store, clock).calculate(query(AnalyticsType.UTILIZATION))
        assert [(p["period"], p["inUse"]) for p in result["utilization"]] == [("2024-03", 1), ("2024-04", 1)]
        assert result["summary"]["averageUtilization"] == 25.0
        assert sorted(a["id"] for a in result["summary"]["underutilizedAssets"]) == ["a2", "a3"]

    async def test_department_filter(self, store, clock):
        result = await UtilizationCalculator(store, clock).calculate(query(AnalyticsType.UTILIZATION, department="IT"))
        assert result["utilization"] == [{"period": "2024-03", "utilization": 50.0, "inUse": 1, "totalAssets": 2}]

    async def test_changes_after_range_keep_past_periods(self, conn, store, clock):
        conn.execute(
            "INSERT INTO asset_event VALUES (?, ?, ?, ?, ?, ?)",
            ["e6", "a2", "STATUS_CHANGED", "IN_USE", "AVAILABLE", datetime(2024, 5, 10)],
        )
        q = AnalyticsQuery(
            type=AnalyticsType.UTILIZATION,
            date_range=DateRange(start=datetime(2024, 1, 1), end=datetime(2024, 3, 31)),
        )
        result = await UtilizationCalculator(store, clock).calculate(q)
        assert result["utilization"] == [{"period": "2024-03", "utilization": 50.0, "inUse": 2, "totalAssets": 4}]


class TestCost:
    async def test_fleet(self, store, clock):
        result = await CostCalculator(store, clock).calculate(query(AnalyticsType.COST))
        assert result["totalValue"] == 26300.0
        assert result["depreciatedValue"] == 9913.2
        assert result["costByDepartment"] == {"IT": 1300.0, "Logistics": 20000.0}
        assert result["roi"]["utilizationROI"] == 25.0

    async def test_category_filter(self, store, clock):
        result = await CostCalculator(store, clock).calculate(query(AnalyticsType.COST, category="VEHICLE"))
        assert result["totalValue"] == 20000.0


class TestPerformance:
    async def test_reliability(self, store, clock):
        result = await PerformanceCalculator(store, clock).calculate(query(AnalyticsType.PERFORMANCE))
        assert result["mtbf"]["value"] == 15.0
        assert result["mttr"]["value"] == 6.0
        assert result["maintenanceEfficiency"] == {"preventiveRatio": 1.0, "efficiency": "Low"}

    async def test_scoped_to_department(self, store, clock):
        result = await PerformanceCalculator(store, clock).calculate(query(AnalyticsType.PERFORMANCE, department="IT"))
        assert result["mtbf"]["interpretation"] == "No failures recorded"
        assert result["availability"]["percentage"] == 100.0

    async def test_default_window(self, store, clock):
        result = await PerformanceCalculator(store, clock).calculate(AnalyticsQuery(type=AnalyticsType.PERFORMANCE))
        assert result["failureRate"] == 3.0


class TestPredictive:
    async def test_schedule_and_lifecycle(self, store, clock):
        result = await PredictiveCalculator(store, clock).calculate(query(AnalyticsType.PREDICTIVE))
        [due] = result["maintenanceSchedule"]
        assert due["assetId"] == "a4"
        assert due["priority"] == "Overdue"
        assert due["maintenanceIntervalDays"] == 31
        assert due["estimatedDuration"] == 6
        by_asset = {e["assetId"]: e for e in result["lifecycleAnalysis"]}
        assert by_asset["a2"]["recommendation"] == "Plan for replacement"
        assert by_asset["a1"]["recommendation"] == "Monitor condition"
        assert "a3" not in by_asset
        assert result["recommendations"][0]["priority"] == "critical"


class TestTrend:
    async def test_monthly(self, store, clock):
        result = await TrendCalculator(store, clock).calculate(query(AnalyticsType.TREND, group_by=GroupBy.MONTH))
        assert [(t["period"], t["eventCount"]) for t in result["trends"]] == [
            ("2024-03", 2),
            ("2024-04", 2),
            ("2024-05", 1),
        ]
        assert len(result["forecast"]) == 3

    async def test_category_scope(self, store, clock):
        result = await TrendCalculator(store, clock).calculate(query(AnalyticsType.TREND, category="VEHICLE"))
        assert [t["eventCount"] for t in result["trends"]] == [1]
        assert result["indicators"] == {"trend": "insufficient_data"}


class TestReportGenerator:
    async def test_filtered_and_grouped(self, store, clock):
        config = ReportConfig(
            name="IT fleet",
            metrics=["count", "totalValue"],
            filters=ReportFilters(date_range=RANGE, departments=["IT"]),
            group_by=["category"],
        )
        report = await ReportGenerator(store, clock).generate(config)
        assert report["name"] == "IT fleet"
        assert report["data"]["count"] == 2
        assert report["data"]["totalValue"] == 1300.0
        assert report["data"]["grouped"]["OFFICE_FURNITURE"] == {"count": 1, "totalValue": 300.0}
        assert report["generatedAt"] == "2024-06-15T12:00:00"

    async def test_created_at_window(self, store, clock):
        config = ReportConfig(
            name="Q1",
            metrics=["count"],
            filters=ReportFilters(date_range=DateRange(start=datetime(2024, 2, 1), end=datetime(2024, 3, 31))),
        )
        report = await ReportGenerator(store, clock).generate(config)
        assert report["data"] == {"count": 2}
