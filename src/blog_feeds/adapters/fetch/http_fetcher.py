"""HTTP page fetcher backed by httpx."""

from types import TracebackType
from typing import Optional

import httpx

from blog_feeds.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from blog_feeds.core import FetchError


class HttpFetcher:
    """Download listing pages with one shared async client.

    Instances are callables matching the ``Fetcher`` signature and must be
    used as async context managers so the underlying client gets closed.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "HttpFetcher":
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
            )
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __call__(self, url: str) -> str:
        """Return the page body, raising FetchError on any failure."""
        if self._client is None:
            raise RuntimeError("HttpFetcher must be used inside 'async with'")

        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or e.__class__.__name__) from e

        if not response.is_success:
            raise FetchError(url, f"HTTP {response.status_code}")

        return response.text
