"""Tests for utilization analytics."""

from datetime import datetime, timedelta

from app.models.analytics import GroupBy
from app.services.analytics.utilization import (
    average_utilization,
    in_use_delta,
    in_use_series,
    peak_utilization,
    starting_in_use,
    underutilized_assets,
    utilization_report,
)

NOW = datetime(2024, 6, 15, 12, 0)


def status(asset_id: str, frm: str, to: str, at: datetime) -> dict:
    return {"asset_id": asset_id, "event_type": "STATUS_CHANGED", "from_value": frm, "to_value": to, "at": at}


class TestInUseDelta:
    def test_enter(self):
        assert in_use_delta(status("a", "AVAILABLE", "IN_USE", NOW)) == 1

    def test_leave(self):
        assert in_use_delta(status("a", "IN_USE", "MAINTENANCE", NOW)) == -1

    def test_unrelated(self):
        assert in_use_delta(status("a", "AVAILABLE", "RESERVED", NOW)) == 0


class TestInUseSeries:
    def test_end_of_period_counts(self):
        events = [
            status("a", "AVAILABLE", "IN_USE", datetime(2024, 1, 5)),
            status("b", "AVAILABLE", "IN_USE", datetime(2024, 1, 20)),
            status("a", "IN_USE", "AVAILABLE", datetime(2024, 2, 3)),
        ]
        series = in_use_series(events, 4, GroupBy.MONTH)
        assert series == [
            {"period": "2024-01", "utilization": 50.0, "inUse": 2, "totalAssets": 4},
            {"period": "2024-02", "utilization": 25.0, "inUse": 1, "totalAssets": 4},
        ]

    def test_sorted_before_counting(self):
        events = [
            status("a", "IN_USE", "AVAILABLE", datetime(2024, 2, 3)),
            status("a", "AVAILABLE", "IN_USE", datetime(2024, 1, 5)),
        ]
        series = in_use_series(events, 2, GroupBy.MONTH)
        assert [p["inUse"] for p in series] == [1, 0]

    def test_counter_clamped(self):
        events = [status("a", "IN_USE", "AVAILABLE", datetime(2024, 1, 5))]
        assert in_use_series(events, 3, GroupBy.MONTH)[0]["inUse"] == 0

        events = [status(x, "AVAILABLE", "IN_USE", datetime(2024, 1, 5)) for x in "abc"]
        assert in_use_series(events, 2, GroupBy.MONTH)[0]["inUse"] == 2

    def test_non_status_events_ignored(self):
        events = [{"asset_id": "a", "event_type": "ASSIGNED", "from_value": None, "to_value": "IN_USE", "at": NOW}]
        assert in_use_series(events, 1, GroupBy.MONTH) == []

    def test_no_assets(self):
        events = [status("a", "AVAILABLE", "IN_USE", datetime(2024, 1, 5))]
        assert in_use_series(events, 0, GroupBy.MONTH)[0]["utilization"] == 0.0


class TestSummary:
    def test_starting_count_rewound(self):
        assets = [{"id": "a", "available_status": "IN_USE"}, {"id": "b", "available_status": "AVAILABLE"}]
        events = [status("a", "AVAILABLE", "IN_USE", datetime(2024, 1, 5))]
        assert starting_in_use(assets, events) == 0

    def test_average(self):
        assert average_utilization([{"utilization": 50.0}, {"utilization": 25.0}]) == 37.5
        assert average_utilization([]) == 0.0

    def test_peak_first_wins(self):
        series = [
            {"period": "2024-01", "utilization": 50.0},
            {"period": "2024-02", "utilization": 75.0},
            {"period": "2024-03", "utilization": 75.0},
        ]
        assert peak_utilization(series) == {"value": 75.0, "period": "2024-02"}

    def test_peak_empty(self):
        assert peak_utilization([]) == {"value": 0, "period": None}

    def test_underutilized(self):
        assets = [
            {"id": "never", "name": "N", "available_status": "AVAILABLE", "last_used_at": None},
            {"id": "old", "name": "O", "available_status": "AVAILABLE", "last_used_at": NOW - timedelta(days=45)},
            {"id": "fresh", "name": "F", "available_status": "AVAILABLE", "last_used_at": NOW - timedelta(days=3)},
            {"id": "busy", "name": "B", "available_status": "IN_USE", "last_used_at": None},
        ]
        result = underutilized_assets(assets, NOW)
        assert [a["id"] for a in result] == ["never", "old"]
        assert result[0]["lastUsed"] is None
        assert result[1]["lastUsed"] == (NOW - timedelta(days=45)).isoformat()


class TestUtilizationReport:
    def test_empty(self):
        result = utilization_report([], [], GroupBy.MONTH, NOW)
        assert result == {
            "utilization": [],
            "summary": {
                "averageUtilization": 0.0,
                "peakUtilization": {"value": 0, "period": None},
                "underutilizedAssets": [],
            },
        }

    def test_events_of_other_assets_ignored(self):
        assets = [{"id": "a", "available_status": "IN_USE"}]
        events = [
            status("a", "AVAILABLE", "IN_USE", datetime(2024, 1, 5)),
            status("z", "AVAILABLE", "IN_USE", datetime(2024, 1, 6)),
        ]
        result = utilization_report(assets, events, GroupBy.MONTH, NOW)
        assert result["utilization"] == [{"period": "2024-01", "utilization": 100.0, "inUse": 1, "totalAssets": 1}]

    def test_later_changes_rewind_baseline_only(self):
        assets = [
            {"id": "a", "available_status": "AVAILABLE"},
            {"id": "b", "available_status": "IN_USE"},
        ]
        events = [
            status("a", "AVAILABLE", "IN_USE", datetime(2024, 1, 10)),
            status("a", "IN_USE", "AVAILABLE", datetime(2024, 3, 5)),
        ]
        result = utilization_report(assets, events, GroupBy.MONTH, NOW, end=datetime(2024, 1, 31))
        assert result["utilization"] == [{"period": "2024-01", "utilization": 100.0, "inUse": 2, "totalAssets": 2}]
