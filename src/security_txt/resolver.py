"""Locate and parse a security.txt file given only a base URL."""

from __future__ import annotations

import io
import logging
from typing import List
from urllib.parse import urlsplit, urlunsplit, SplitResult

from .core.model import (
    Attempt, Document, InvalidLocationError, ResolutionFailedError,
    SecurityTxtError, StatusCodeError,
)
from .io.base import AsyncFetcher, Fetcher, FetchResponse
from .io.http_async import HTTPXFetcher
from .io.http_sync import RequestsFetcher
from .parser import DocumentParser

# tried in this order, only when the base location has an empty or "/" path
WELL_KNOWN_PATHS = ("security.txt", ".well-known/security.txt")


def _split(location: str) -> SplitResult:
    try:
        parts = urlsplit(location)
        # port is only validated on access
        parts.port
    except ValueError as e:
        raise InvalidLocationError(location, str(e)) from e
    if not parts.scheme or not parts.netloc:
        raise InvalidLocationError(location, "scheme and host are required")
    return parts


def candidate_locations(location: str) -> list[str]:
    """Every location resolve() may try for ``location``, in attempt order."""
    parts = _split(location)
    candidates = [location]
    if parts.path in ("", "/"):
        candidates += [urlunsplit(parts._replace(path="/" + p)) for p in WELL_KNOWN_PATHS]
    return candidates


class LocationResolver:
    """Fetches and parses a document, falling back to well-known paths.

    Attempts run strictly one after another; the fallback paths are only
    tried when the given location has no path of its own.
    """

    def __init__(
        self,
        parser: DocumentParser | None = None,
        fetcher: Fetcher | None = None,
        async_fetcher: AsyncFetcher | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.parser = parser or DocumentParser()
        self.fetcher = fetcher or RequestsFetcher()
        self._async_fetcher = async_fetcher
        self.logger = logger or logging.getLogger(__name__)

    @property
    def async_fetcher(self) -> AsyncFetcher:
        if self._async_fetcher is None:
            self._async_fetcher = HTTPXFetcher()
        return self._async_fetcher

    # ------------------------------------------------------------------ #
    def _parse_response(self, response: FetchResponse) -> Document:
        if response.status_code > 299:
            raise StatusCodeError(response.status_code, response.location)
        return self.parser.parse(io.BytesIO(response.body))

    def _record(self, attempts: List[Attempt], location: str, error: SecurityTxtError) -> None:
        self.logger.warning("Unable to parse file at given location url=%s error=%s", location, error)
        attempts.append(Attempt(location, error))

    def _announce(self, index: int, location: str, candidates: list[str]) -> None:
        if index == 1:
            self.logger.warning(
                "Provided URL has empty path, trying more URLs with known paths url=%s", candidates[0]
            )
        if index >= 1:
            self.logger.info("Trying URL url=%s", location)

    # --------------------------- sync ---------------------------------- #
    def resolve(self, location: str) -> Document:
        candidates = candidate_locations(location)
        attempts: List[Attempt] = []
        for i, candidate in enumerate(candidates):
            self._announce(i, candidate, candidates)
            try:
                return self._parse_response(self.fetcher.fetch(candidate))
            except SecurityTxtError as e:
                self._record(attempts, candidate, e)
        raise ResolutionFailedError(attempts)

    # -------------------------- async ---------------------------------- #
    async def resolve_async(self, location: str) -> Document:
        candidates = candidate_locations(location)
        attempts: List[Attempt] = []
        for i, candidate in enumerate(candidates):
            self._announce(i, candidate, candidates)
            try:
                return self._parse_response(await self.async_fetcher.fetch(candidate))
            except SecurityTxtError as e:
                self._record(attempts, candidate, e)
        raise ResolutionFailedError(attempts)
