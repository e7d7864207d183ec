"""Shared fixtures - in-memory DuckDB seeded with a small asset fleet."""

from datetime import datetime, timedelta

import duckdb
import pytest

from app.repositories.db import init_tables
from app.repositories.records import RecordStore

NOW = datetime(2024, 6, 15, 12, 0)

ASSETS = [
    # id, name, category, department, price, purchase_date, status, condition, last_used_at, created_at
    ("a1", "Laptop", "IT_EQUIPMENT", "IT", 1000.0, NOW - timedelta(days=731), "IN_USE", "GOOD",
     NOW - timedelta(days=1), datetime(2024, 1, 10)),
    ("a2", "Van", "VEHICLE", "Logistics", 20000.0, NOW - timedelta(days=7 * 365 + 2), "AVAILABLE", "GOOD",
     NOW - timedelta(days=60), datetime(2024, 2, 1)),
    ("a3", "Desk", "OFFICE_FURNITURE", "IT", 300.0, NOW - timedelta(days=400), "AVAILABLE", "NEW",
     None, datetime(2024, 3, 5)),
    ("a4", "Generator", "POWER_ASSET", None, 5000.0, NOW - timedelta(days=100), "MAINTENANCE", "FAIR",
     None, datetime(2024, 4, 1)),
]

EVENTS = [
    # id, asset_id, event_type, from_value, to_value, at
    ("e1", "a1", "STATUS_CHANGED", "AVAILABLE", "IN_USE", datetime(2024, 3, 10)),
    ("e2", "a4", "STATUS_CHANGED", "AVAILABLE", "MAINTENANCE", datetime(2024, 3, 20)),
    ("e3", "a4", "STATUS_CHANGED", "MAINTENANCE", "AVAILABLE", datetime(2024, 4, 1)),
    ("e4", "a4", "STATUS_CHANGED", "AVAILABLE", "MAINTENANCE", datetime(2024, 4, 20)),
    ("e5", "a2", "ASSIGNED", None, None, datetime(2024, 5, 1)),
]

ISSUES = [
    # id, asset_id, issue_type, reported_at, resolved_at
    ("i1", "a4", "BREAKDOWN", datetime(2024, 3, 1, 8), datetime(2024, 3, 1, 12)),
    ("i2", "a4", "BREAKDOWN", datetime(2024, 3, 11, 8), datetime(2024, 3, 11, 16)),
    ("i3", "a2", "OTHER", datetime(2024, 3, 31, 8), None),
]

STAFF = [
    # id, name, email, roles, active
    ("admin-1", "Ada Admin", "ada@example.org", ["SYSTEM_ADMIN"], True),
    ("mgr-1", "Max Manager", "max@example.org", ["SENIOR_MANAGER"], True),
    ("staff-1", "Sam Staff", "sam@example.org", ["STAFF"], True),
    ("gone-1", "Gil Gone", "gil@example.org", ["ASSET_ADMIN"], False),
]


def seed(conn: duckdb.DuckDBPyConnection) -> None:
    conn.executemany("INSERT INTO asset VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)", ASSETS)
    conn.executemany("INSERT INTO asset_event VALUES (?, ?, ?, ?, ?, ?)", EVENTS)
    conn.executemany("INSERT INTO asset_issue VALUES (?, ?, ?, ?, ?)", ISSUES)
    conn.executemany("INSERT INTO staff VALUES (?, ?, ?, ?, ?)", STAFF)


@pytest.fixture
def empty_conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def conn(empty_conn):
    seed(empty_conn)
    return empty_conn


@pytest.fixture
def store(conn):
    return RecordStore(conn=conn)


@pytest.fixture
def now():
    return NOW
