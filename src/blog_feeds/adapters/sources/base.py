"""Shared crawl behavior for blog sources."""

from dataclasses import replace
from datetime import date

from blog_feeds.adapters.crawlers import MAX_PAGES, crawl_paginated, crawl_single_page
from blog_feeds.core import BlogSource, Fetcher, Post


class _TaggingSource(BlogSource):
    def tag(self, posts: list[Post]) -> list[Post]:
        """Attach this source's name to parsed posts."""
        return [replace(post, source=self.name) for post in posts]

    @staticmethod
    def year() -> int:
        return date.today().year


class PaginatedBlogSource(_TaggingSource):
    """Source whose listing spans numbered ``/page/N`` pages."""

    def __init__(self, max_pages: int = MAX_PAGES) -> None:
        self.max_pages = max_pages

    async def crawl(self, fetch: Fetcher) -> list[Post]:
        posts = await crawl_paginated(fetch, self.listing_url, self.parse, self.max_pages)
        return self.tag(posts)


class SinglePageBlogSource(_TaggingSource):
    """Source whose whole listing is served on one page."""

    async def crawl(self, fetch: Fetcher) -> list[Post]:
        posts = await crawl_single_page(fetch, self.listing_url, self.parse, self.name)
        return self.tag(posts)
