"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Awaitable, Callable

from blog_feeds.core.entities import Feed, Post

Fetcher = Callable[[str], Awaitable[str]]


class FetchError(Exception):
    """Raised when a page cannot be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class BlogSource(ABC):
    """Interface for one scraped blog listing."""

    emoji: str = "📰"
    name: str
    slug: str
    listing_url: str
    site_url: str
    description: str
    copyright: str
    image: str | None = None

    @abstractmethod
    def parse(self, html: str) -> list[Post]:
        """Extract candidate posts from one listing page."""
        pass

    @abstractmethod
    async def crawl(self, fetch: Fetcher) -> list[Post]:
        """Fetch and parse every listing page of this source."""
        pass


class FeedEmitter(ABC):
    """Interface for serializing feeds to disk."""

    @abstractmethod
    def emit(self, feed: Feed, directory: Path) -> list[Path]:
        """Write RSS, Atom and JSON documents for the feed into directory."""
        pass
