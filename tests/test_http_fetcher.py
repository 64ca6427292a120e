"""Tests for the httpx-backed fetcher."""

import httpx
import pytest

from blog_feeds.adapters.fetch import HttpFetcher
from blog_feeds.config import Settings
from blog_feeds.core import FetchError


def make_client(handler) -> httpx.AsyncClient:
    """Create a client served by an in-process handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_success() -> None:
    """Test the page body is returned."""
    client = make_client(lambda request: httpx.Response(200, text="<html>ok</html>"))

    async with HttpFetcher(client=client) as fetch:
        assert await fetch("https://cursor.com/blog") == "<html>ok</html>"

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_non_success_status() -> None:
    """Test non-2xx responses raise FetchError."""
    client = make_client(lambda request: httpx.Response(404))

    async with HttpFetcher(client=client) as fetch:
        with pytest.raises(FetchError, match="HTTP 404"):
            await fetch("https://cursor.com/blog/page/9")

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_network_error() -> None:
    """Test transport errors are wrapped in FetchError."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    async with HttpFetcher(client=client) as fetch:
        with pytest.raises(FetchError) as exc_info:
            await fetch("https://claude.com/blog")

    assert exc_info.value.url == "https://claude.com/blog"
    assert "connection refused" in str(exc_info.value)
    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_owns_default_client() -> None:
    """Test the fetcher opens and closes its own client."""
    fetcher = HttpFetcher(timeout=5.0, user_agent="TestAgent/1.0")

    async with fetcher:
        assert fetcher._client is not None
        assert fetcher._client.headers["User-Agent"] == "TestAgent/1.0"

    assert fetcher._client is None


@pytest.mark.asyncio
async def test_fetch_outside_context_manager() -> None:
    """Test calling without entering the context manager fails loudly."""
    with pytest.raises(RuntimeError):
        await HttpFetcher()("https://cursor.com/blog")


def test_defaults_match_settings() -> None:
    """Test a bare fetcher uses the same defaults as the fetch settings."""
    fetcher = HttpFetcher()
    settings = Settings()

    assert fetcher.user_agent == settings.fetch.user_agent
    assert fetcher.timeout == settings.fetch.timeout
