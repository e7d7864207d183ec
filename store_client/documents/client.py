"""Documents API client - paginated collection listing."""

import json

from loguru import logger

from settings import PAGE_SIZE, STORE_DATABASE_ID
from store_client.base import BaseClient


def query(method: str, *values) -> str:
    """Store query in its JSON wire format."""
    return json.dumps({"method": method, "values": list(values)})


class DocumentsClient(BaseClient):
    """Client for the store's documents endpoints."""

    def __init__(self, database_id: str = STORE_DATABASE_ID, **kwargs):
        super().__init__(**kwargs)
        self._database_id = database_id

    async def list_page(self, collection: str, limit: int = PAGE_SIZE, cursor: str | None = None) -> dict:
        """GET /databases/{db}/collections/{collection}/documents - one page."""
        queries = [query("limit", limit), query("orderAsc", "$id")]
        if cursor:
            queries.append(query("cursorAfter", cursor))
        return await self._get(
            f"databases/{self._database_id}/collections/{collection}/documents",
            params=[("queries[]", q) for q in queries],
        )

    async def list_documents(self, collection: str, page_size: int = PAGE_SIZE) -> list[dict]:
        """All documents of a collection, following the id cursor."""
        documents: list[dict] = []
        cursor = None
        while True:
            page = await self.list_page(collection, page_size, cursor)
            batch = page.get("documents", [])
            documents.extend(batch)
            if len(batch) < page_size:
                break
            cursor = batch[-1]["$id"]

        logger.debug("Collection {}: {} documents", collection, len(documents))
        return documents
