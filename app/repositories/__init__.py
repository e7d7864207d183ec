"""Repositories package - data access layer for our database."""

from app.repositories.auth import StaffRepository
from app.repositories.base import BaseRepository
from app.repositories.common import ResultCache
from app.repositories.db import (
    close_db,
    db_exists,
    get_db,
    get_write_connection,
    init_tables,
)
from app.repositories.records import Query, RecordKind, RecordPage, RecordStore

__all__ = [
    # DB
    "get_db",
    "close_db",
    "db_exists",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Common
    "ResultCache",
    # Records
    "Query",
    "RecordKind",
    "RecordPage",
    "RecordStore",
    # Auth
    "StaffRepository",
]
