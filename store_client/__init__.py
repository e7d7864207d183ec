"""Document store API client package."""

from store_client.base import BaseClient
from store_client.documents import DocumentsClient

__all__ = [
    "BaseClient",
    "DocumentsClient",
]
