"""Fetch protocols and shared types for the I/O layer."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


DEFAULT_TIMEOUT = 30.0  # seconds


@dataclass(frozen=True, slots=True)
class FetchResponse:
    status_code: int
    body: bytes
    location: str


@runtime_checkable
class Fetcher(Protocol):
    """Protocol for synchronous fetch capabilities."""

    def fetch(self, location: str) -> FetchResponse:
        """GET `location` and return whatever response arrived, any status.
        If no response can be obtained → raise TransportError.
        """
        ...


@runtime_checkable
class AsyncFetcher(Protocol):
    """Protocol for asynchronous fetch capabilities."""

    async def fetch(self, location: str) -> FetchResponse:
        """GET `location` and return whatever response arrived, any status.
        If no response can be obtained → raise TransportError.
        """
        ...
