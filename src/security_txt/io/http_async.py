"""Asynchronous HTTP fetcher using httpx."""

import httpx
from typing import Optional
from contextlib import asynccontextmanager

from .base import FetchResponse, DEFAULT_TIMEOUT
from ..core.model import TransportError


# Global async client
_client: Optional[httpx.AsyncClient] = None


@asynccontextmanager
async def _get_client():
    """Get or create the global httpx AsyncClient."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, follow_redirects=True)

    try:
        yield _client
    finally:
        # Don't close the client here - it's shared
        pass


class HTTPXFetcher:
    """Asynchronous fetcher; redirects are followed."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self._client = client

    async def _get(self, client: httpx.AsyncClient, location: str) -> httpx.Response:
        return await client.get(location, timeout=self.timeout, follow_redirects=True)

    async def fetch(self, location: str) -> FetchResponse:
        try:
            if self._client is not None:
                response = await self._get(self._client, location)
            else:
                async with _get_client() as client:
                    response = await self._get(client, location)
        except (httpx.RequestError, httpx.InvalidURL, ValueError) as e:
            raise TransportError(location, str(e) or type(e).__name__) from e
        return FetchResponse(response.status_code, response.content, location)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        # Client is shared, don't close it here
        pass


async def open_http_fetcher_async(timeout: float = DEFAULT_TIMEOUT) -> HTTPXFetcher:
    """Create an asynchronous HTTP fetcher."""
    return HTTPXFetcher(timeout)


async def close_global_client():
    """Close the global httpx client. Call this at application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
