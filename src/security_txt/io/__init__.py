"""I/O layer for security_txt - fetch capabilities and local sources."""

# Re-export these for import convenience
from .base import Fetcher, AsyncFetcher, FetchResponse, DEFAULT_TIMEOUT
from .local import LocalSource, open_local_source
from .http_sync import RequestsFetcher, open_http_fetcher
from .http_async import HTTPXFetcher, open_http_fetcher_async, close_global_client


def is_remote(source) -> bool:
    """True for http(s) URLs, False for paths and file objects."""
    if hasattr(source, 'read'):
        return False
    return str(source).startswith(('http://', 'https://'))
