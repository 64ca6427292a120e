"""Fetch-and-parse loops for paginated and single-page listings."""

from typing import Callable
from urllib.parse import urlparse

from blog_feeds.core import Fetcher, FetchError, Post

MAX_PAGES = 100

PageParser = Callable[[str], list[Post]]


def page_url(listing_url: str, page: int) -> str:
    """URL of the given 1-based listing page."""
    base = listing_url.rstrip("/")
    return base if page == 1 else f"{base}/page/{page}"


def has_next_page(html: str, listing_url: str, page: int) -> bool:
    """Textual check for a link to the page after ``page``."""
    path = urlparse(listing_url).path.rstrip("/")
    return f"{path}/page/{page + 1}" in html


async def crawl_paginated(
    fetch: Fetcher,
    listing_url: str,
    parse: PageParser,
    max_pages: int = MAX_PAGES,
) -> list[Post]:
    """Walk numbered listing pages until one is empty or has no successor.

    A failed fetch ends the crawl quietly with whatever was collected so
    far. Results are returned in page order and are not deduplicated.
    """
    posts: list[Post] = []

    for page in range(1, max_pages + 1):
        try:
            html = await fetch(page_url(listing_url, page))
        except FetchError:
            break

        page_posts = parse(html)
        if not page_posts:
            break

        posts.extend(page_posts)

        if not has_next_page(html, listing_url, page):
            break

    return posts


async def crawl_single_page(
    fetch: Fetcher,
    listing_url: str,
    parse: PageParser,
    name: str = "",
) -> list[Post]:
    """Fetch and parse one listing page; a failed fetch yields no posts."""
    try:
        html = await fetch(listing_url)
    except FetchError as e:
        print(f"  └─ ❌ {name or listing_url}: {e}")
        return []

    return parse(html)
