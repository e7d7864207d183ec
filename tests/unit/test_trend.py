"""Tests for trend analytics."""

from datetime import datetime

from app.models.analytics import GroupBy
from app.services.analytics.trend import forecast, group_events_by_period, trend_indicators, trend_report


def counts(*values: int) -> list[dict]:
    return [{"period": f"p{i}", "eventCount": v} for i, v in enumerate(values)]


def event(at: datetime) -> dict:
    return {"id": at.isoformat(), "asset_id": "a", "event_type": "ASSIGNED", "at": at}


class TestForecast:
    def test_linear(self):
        assert forecast([1, 2, 3, 4, 5]) == [
            {"period": "forecast_1", "predictedCount": 6},
            {"period": "forecast_2", "predictedCount": 7},
            {"period": "forecast_3", "predictedCount": 8},
        ]

    def test_too_few_points(self):
        assert forecast([1, 2]) == []

    def test_never_negative(self):
        assert [p["predictedCount"] for p in forecast([5, 3, 1])] == [0, 0, 0]

    def test_flat(self):
        assert [p["predictedCount"] for p in forecast([4, 4, 4])] == [4, 4, 4]

    def test_ties_round_up(self):
        assert [p["predictedCount"] for p in forecast([0, 1, 1, 0])] == [1, 1, 1]
        assert [p["predictedCount"] for p in forecast([2, 3, 3, 2])] == [3, 3, 3]


class TestIndicators:
    def test_insufficient(self):
        assert trend_indicators(counts(3)) == {"trend": "insufficient_data"}
        assert trend_indicators([]) == {"trend": "insufficient_data"}

    def test_increasing(self):
        assert trend_indicators(counts(2, 2, 4, 4)) == {"trend": "increasing", "percentChange": 100.0, "average": 3.0}

    def test_decreasing(self):
        assert trend_indicators(counts(4, 4, 2, 2))["trend"] == "decreasing"

    def test_stable(self):
        assert trend_indicators(counts(10, 10, 10, 11))["trend"] == "stable"

    def test_odd_length_split(self):
        # first half is the shorter one
        result = trend_indicators(counts(2, 4, 4))
        assert result["percentChange"] == 100.0

    def test_zero_first_half(self):
        assert trend_indicators(counts(0, 5))["percentChange"] == 100.0
        assert trend_indicators(counts(0, 0)) == {"trend": "stable", "percentChange": 0.0, "average": 0.0}


class TestGrouping:
    def test_chronological_periods(self):
        events = [event(datetime(2024, 3, 2)), event(datetime(2024, 1, 15)), event(datetime(2024, 1, 2))]
        trends = group_events_by_period(events, GroupBy.MONTH)
        assert [(t["period"], t["eventCount"]) for t in trends] == [("2024-01", 2), ("2024-03", 1)]

    def test_events_serialized(self):
        [trend] = group_events_by_period([event(datetime(2024, 1, 2))], GroupBy.DAY)
        assert trend["events"][0]["at"] == "2024-01-02T00:00:00"

    def test_report(self):
        events = [event(datetime(2024, m, 1)) for m in (1, 2, 2, 3, 3, 3)]
        result = trend_report(events, GroupBy.MONTH)
        assert [t["eventCount"] for t in result["trends"]] == [1, 2, 3]
        assert [p["predictedCount"] for p in result["forecast"]] == [4, 5, 6]
        assert result["indicators"]["trend"] == "increasing"
