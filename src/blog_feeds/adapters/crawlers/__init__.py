"""Crawl loops driving fetch and parse cycles."""

from blog_feeds.adapters.crawlers.crawlers import (
    MAX_PAGES,
    crawl_paginated,
    crawl_single_page,
    has_next_page,
    page_url,
)

__all__ = ["MAX_PAGES", "crawl_paginated", "crawl_single_page", "has_next_page", "page_url"]
