"""Documents API client - assets, events, issues, staff."""

from store_client.documents.client import DocumentsClient, query
from store_client.documents.schemas import (
    AssetDocument,
    AssetEventDocument,
    AssetIssueDocument,
    StaffDocument,
)

__all__ = [
    "DocumentsClient",
    "query",
    "AssetDocument",
    "AssetEventDocument",
    "AssetIssueDocument",
    "StaffDocument",
]
