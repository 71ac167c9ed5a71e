"""Synchronous HTTP fetcher using requests."""

import requests

from .base import FetchResponse, DEFAULT_TIMEOUT
from ..core.model import TransportError


# Module-level session for connection pooling
_session = None


def _get_session():
    """Get or create the global requests session."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


class RequestsFetcher:
    """Synchronous fetcher; redirects are followed."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None):
        self.timeout = timeout
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = _get_session()
        return self._session

    def fetch(self, location: str) -> FetchResponse:
        try:
            response = self.session.get(location, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            raise TransportError(location, str(e)) from e
        return FetchResponse(response.status_code, response.content, location)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Session is shared, don't close it here
        pass


def open_http_fetcher(timeout: float = DEFAULT_TIMEOUT) -> RequestsFetcher:
    """Create a synchronous HTTP fetcher."""
    return RequestsFetcher(timeout)
