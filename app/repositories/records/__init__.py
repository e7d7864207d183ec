"""Record store - assets, asset events and asset issues."""

from app.repositories.records.query import COLUMNS, Op, Predicate, Query, RecordKind
from app.repositories.records.store import RecordPage, RecordStore

__all__ = [
    "COLUMNS",
    "Op",
    "Predicate",
    "Query",
    "RecordKind",
    "RecordPage",
    "RecordStore",
]
