"""Cursor blog: server-rendered cards, paginated."""

from blog_feeds.adapters.crawlers import MAX_PAGES
from blog_feeds.adapters.parsers import parse_blog_listing
from blog_feeds.adapters.sources.base import PaginatedBlogSource
from blog_feeds.core import Post


class CursorBlogSource(PaginatedBlogSource):
    """Scrape the Cursor blog listing."""

    emoji = "🖱️"
    name = "Cursor Blog"
    slug = "cursor"
    listing_url = "https://cursor.com/blog"
    site_url = "https://cursor.com"
    description = "The latest updates from the Cursor team"
    image = "https://cursor.com/favicon.ico"

    def __init__(self, max_pages: int = MAX_PAGES) -> None:
        super().__init__(max_pages)
        self.copyright = f"© {self.year()} Anysphere, Inc."

    def parse(self, html: str) -> list[Post]:
        return parse_blog_listing(html, self.site_url)
