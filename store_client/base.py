"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from settings import STORE_API_KEY, STORE_ENDPOINT, STORE_PROJECT_ID, STORE_TIMEOUT


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors + 429)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500 or exc.response.status_code == 429
    return False


class BaseClient:
    """Base async HTTP client for the document store REST API."""

    def __init__(
        self,
        max_concurrent: int = 10,
        endpoint: str = STORE_ENDPOINT,
        project_id: str = STORE_PROJECT_ID,
        api_key: str = STORE_API_KEY,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        self._endpoint = endpoint.rstrip("/")
        self._headers = {
            "X-Appwrite-Project": project_id,
            "X-Appwrite-Key": api_key,
            "Content-Type": "application/json",
        }
        self._transport = transport
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self._endpoint,
            headers=self._headers,
            timeout=STORE_TIMEOUT,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str, params: list[tuple[str, str]] | None = None) -> dict:
        """GET request with retry logic."""
        async with self._sem:
            self._request_count += 1
            resp = await self._client.get(f"/{path}", params=params)
            resp.raise_for_status()
            return resp.json()
