"""ETL package - data sync from the document store to the database."""

from etl.sync import sync_all, sync_store
from etl.validation import validate_store

__all__ = [
    "sync_all",
    "sync_store",
    "validate_store",
]
