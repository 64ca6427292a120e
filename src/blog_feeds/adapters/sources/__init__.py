"""Source adapters for scraping blog listings."""

from blog_feeds.adapters.crawlers import MAX_PAGES
from blog_feeds.adapters.sources.anthropic_sources import (
    AnthropicEngineeringSource,
    AnthropicResearchSource,
    ClaudeBlogSource,
)
from blog_feeds.adapters.sources.base import PaginatedBlogSource, SinglePageBlogSource
from blog_feeds.adapters.sources.cursor_source import CursorBlogSource
from blog_feeds.core import BlogSource


def default_sources(max_pages: int = MAX_PAGES) -> list[BlogSource]:
    """All configured sources, in crawl order."""
    return [
        CursorBlogSource(max_pages=max_pages),
        ClaudeBlogSource(),
        AnthropicEngineeringSource(),
        AnthropicResearchSource(),
    ]


__all__ = [
    "AnthropicEngineeringSource",
    "AnthropicResearchSource",
    "ClaudeBlogSource",
    "CursorBlogSource",
    "PaginatedBlogSource",
    "SinglePageBlogSource",
    "default_sources",
]
