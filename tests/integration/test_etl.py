"""Tests for the store-to-DuckDB sync."""

from datetime import datetime

from etl import sync_store, validate_store
from etl.assets import load_assets, load_staff
from settings import STORE_COLLECTIONS

DOCUMENTS = {
    STORE_COLLECTIONS["assets"]: [
        {"$id": "a1", "name": "Laptop", "category": "IT_EQUIPMENT", "department": "IT", "purchasePrice": 1000,
         "purchaseDate": "2022-06-01T00:00:00.000+00:00", "availableStatus": "IN_USE",
         "currentCondition": "GOOD", "$createdAt": "2024-01-10T00:00:00.000+00:00"},
    ],
    STORE_COLLECTIONS["asset_events"]: [
        {"$id": "e1", "assetId": "a1", "eventType": "STATUS_CHANGED", "fromValue": "AVAILABLE",
         "toValue": "IN_USE", "at": "2024-03-10T00:00:00.000+00:00"},
    ],
    STORE_COLLECTIONS["asset_issues"]: [
        {"$id": "i1", "assetId": "a1", "issueType": "BREAKDOWN", "reportedAt": "2024-03-01T08:00:00.000+00:00",
         "resolvedAt": "2024-03-01T12:00:00.000+00:00"},
    ],
    STORE_COLLECTIONS["staff"]: [
        {"$id": "s1", "name": "Ada", "email": "ada@example.org", "roles": ["SYSTEM_ADMIN"]},
    ],
}


class FakeDocumentsClient:
    async def list_documents(self, collection: str, page_size: int = 100) -> list[dict]:
        return DOCUMENTS[collection]


class TestLoad:
    def test_assets_replaced(self, conn):
        assert load_assets(conn, DOCUMENTS[STORE_COLLECTIONS["assets"]]) == 1
        rows = conn.execute("SELECT id, purchase_price, purchase_date FROM asset").fetchall()
        assert rows == [("a1", 1000.0, datetime(2022, 6, 1))]

    def test_empty_collection(self, conn):
        assert load_assets(conn, []) == 0
        assert conn.execute("SELECT COUNT(*) FROM asset").fetchone()[0] == 0

    def test_staff_roles(self, empty_conn):
        load_staff(empty_conn, DOCUMENTS[STORE_COLLECTIONS["staff"]])
        assert empty_conn.execute("SELECT roles, active FROM staff").fetchone() == (["SYSTEM_ADMIN"], True)


class TestSyncStore:
    async def test_counts(self, empty_conn):
        counts = await sync_store(empty_conn, FakeDocumentsClient())
        assert counts == {"assets": 1, "asset_events": 1, "asset_issues": 1, "staff": 1}
        assert validate_store(empty_conn)["valid"]


class TestValidateStore:
    def test_seeded_fleet_valid(self, conn):
        result = validate_store(conn)
        assert result["valid"]
        assert result["stats"]["assets"] == 4

    def test_orphans_reported(self, conn):
        conn.execute("DELETE FROM asset WHERE id = 'a4'")
        result = validate_store(conn)
        assert not result["valid"]
        assert result["stats"]["orphan_events"] == 3
        assert result["stats"]["orphan_issues"] == 2

    def test_empty_store(self, empty_conn):
        result = validate_store(empty_conn)
        assert "No assets found" in result["issues"]
