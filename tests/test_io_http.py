"""Tests for HTTP fetchers against a local server."""

import re
from pathlib import Path

import httpx
import pytest
import requests
from werkzeug import Request, Response

from security_txt import LocationResolver, ResolutionFailedError, StatusCodeError, TransportError
from security_txt.io import is_remote
from security_txt.io.http_sync import RequestsFetcher, open_http_fetcher
from security_txt.io.http_async import HTTPXFetcher, open_http_fetcher_async, close_global_client

FIXTURE = (Path(__file__).parent / "fixtures" / "security.txt").read_bytes()

# nothing listens on port 1
UNREACHABLE = "http://127.0.0.1:1/"


def serve_only(httpserver, path):
    """Serve the fixture on ``path`` and 404 everywhere else."""
    def handler(request: Request) -> Response:
        if request.path != path:
            return Response(status=404)
        return Response(FIXTURE, status=200, content_type="text/plain")

    httpserver.expect_request(re.compile(r".*")).respond_with_handler(handler)


class TestRequestsFetcher:
    """Test synchronous HTTP fetcher."""

    def test_fetch_ok(self, httpserver):
        httpserver.expect_request("/security.txt").respond_with_data(FIXTURE)
        response = RequestsFetcher().fetch(httpserver.url_for("/security.txt"))
        assert response.status_code == 200
        assert response.body == FIXTURE
        assert response.location == httpserver.url_for("/security.txt")

    def test_fetch_returns_error_status(self, httpserver):
        httpserver.expect_request("/missing").respond_with_data("", status=404)
        response = RequestsFetcher().fetch(httpserver.url_for("/missing"))
        assert response.status_code == 404

    def test_follows_redirects(self, httpserver):
        httpserver.expect_request("/old").respond_with_data(
            "", status=301, headers={"Location": httpserver.url_for("/new")}
        )
        httpserver.expect_request("/new").respond_with_data(FIXTURE)
        assert RequestsFetcher().fetch(httpserver.url_for("/old")).body == FIXTURE

    def test_transport_error(self):
        with pytest.raises(TransportError) as exc_info:
            RequestsFetcher(timeout=2).fetch(UNREACHABLE)
        assert exc_info.value.location == UNREACHABLE
        assert isinstance(exc_info.value.__cause__, requests.RequestException)

    def test_context_manager_and_factory(self, httpserver):
        httpserver.expect_request("/security.txt").respond_with_data(FIXTURE)
        with open_http_fetcher(timeout=5) as fetcher:
            assert isinstance(fetcher, RequestsFetcher)
            assert fetcher.timeout == 5
            assert fetcher.fetch(httpserver.url_for("/security.txt")).status_code == 200


class TestResolveOverHTTP:
    """End-to-end resolution through RequestsFetcher."""

    @pytest.mark.parametrize("path", ["/", "/security.txt", "/.well-known/security.txt"])
    def test_each_candidate_path(self, httpserver, path):
        serve_only(httpserver, path)
        doc = LocationResolver(fetcher=RequestsFetcher()).resolve(httpserver.url_for("/"))
        assert doc.contact == ("https://example.com/vulnz", "mailto:security@example.com")
        assert doc.preferred_languages == ("en", "es", "fr")

    def test_not_found_everywhere(self, httpserver):
        serve_only(httpserver, "/nowhere")
        base = httpserver.url_for("/")
        with pytest.raises(ResolutionFailedError) as exc_info:
            LocationResolver(fetcher=RequestsFetcher()).resolve(base)
        assert exc_info.value.errors == (
            StatusCodeError(404, base),
            StatusCodeError(404, base + "security.txt"),
            StatusCodeError(404, base + ".well-known/security.txt"),
        )

    def test_non_root_path_not_retried(self, httpserver):
        serve_only(httpserver, "/security.txt")
        with pytest.raises(ResolutionFailedError) as exc_info:
            LocationResolver(fetcher=RequestsFetcher()).resolve(httpserver.url_for("/foo"))
        assert len(exc_info.value.attempts) == 1
        assert len(httpserver.log) == 1

    def test_unreachable_host(self):
        with pytest.raises(ResolutionFailedError) as exc_info:
            LocationResolver(fetcher=RequestsFetcher(timeout=2)).resolve(UNREACHABLE)
        assert len(exc_info.value.errors) == 3
        assert all(isinstance(e, TransportError) for e in exc_info.value.errors)


class TestHTTPXFetcher:
    """Test asynchronous HTTP fetcher."""

    @pytest.mark.asyncio
    async def test_fetch_ok(self, httpserver):
        httpserver.expect_request("/security.txt").respond_with_data(FIXTURE)
        async with httpx.AsyncClient() as client:
            response = await HTTPXFetcher(client=client).fetch(httpserver.url_for("/security.txt"))
        assert response.status_code == 200
        assert response.body == FIXTURE

    @pytest.mark.asyncio
    async def test_global_client(self, httpserver):
        httpserver.expect_request("/security.txt").respond_with_data(FIXTURE)
        try:
            fetcher = await open_http_fetcher_async()
            response = await fetcher.fetch(httpserver.url_for("/security.txt"))
        finally:
            await close_global_client()
        assert response.body == FIXTURE

    @pytest.mark.asyncio
    async def test_transport_error(self):
        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError) as exc_info:
                await HTTPXFetcher(timeout=2, client=client).fetch(UNREACHABLE)
        assert isinstance(exc_info.value.__cause__, httpx.RequestError)

    @pytest.mark.asyncio
    async def test_invalid_url_is_transport_error(self):
        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError) as exc_info:
                await HTTPXFetcher(client=client).fetch("http://host:abc/")
        assert exc_info.value.location == "http://host:abc/"

    @pytest.mark.asyncio
    async def test_resolve_async_fallback(self, httpserver):
        serve_only(httpserver, "/.well-known/security.txt")
        async with httpx.AsyncClient() as client:
            resolver = LocationResolver(async_fetcher=HTTPXFetcher(client=client))
            doc = await resolver.resolve_async(httpserver.url_for("/"))
        assert doc.hiring == "https://example.com/hiring"
        assert [entry[0].path for entry in httpserver.log] == [
            "/", "/security.txt", "/.well-known/security.txt",
        ]


def test_is_remote(tmp_path):
    assert is_remote("https://example.com/")
    assert is_remote("http://example.com")
    assert not is_remote(tmp_path / "security.txt")
    assert not is_remote("security.txt")
    with open(__file__, "rb") as f:
        assert not is_remote(f)
