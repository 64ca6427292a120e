"""Parsers for listings that render each post as a card inside an <article>."""

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from blog_feeds.core import Post, normalize_text

BLOG_PATH = "/blog"
NAVIGATION_PREFIXES = ("/blog/topic", "/blog/page")
DEFAULT_CATEGORY = "post"

_TRAILING_SEPARATOR = re.compile(r"\s*·\s*$")
_META_LINE = re.compile(r"^(\w+)\s*·\s*(.+)$")


def is_navigation_link(href: str | None) -> bool:
    """True for the listing root, pagination and topic filter links."""
    if not href or href == BLOG_PATH:
        return True
    return href.startswith(NAVIGATION_PREFIXES)


def split_lines(anchor: Tag) -> list[str]:
    """Non-empty, whitespace-normalized lines of an element's text.

    Lines break only where the text itself has newlines, so inline markup
    such as ``<code>`` stays part of the surrounding line.
    """
    lines = (normalize_text(line) for line in anchor.get_text().split("\n"))
    return [line for line in lines if line]


def _post_or_none(**fields: str) -> Post | None:
    if not fields.get("title") or not fields.get("link"):
        return None
    return Post(**fields)


def _card_post(anchor: Tag, site_url: str) -> Post | None:
    href = anchor.get("href")
    paragraphs = anchor.find_all("p")
    title = normalize_text(paragraphs[0].get_text()) if paragraphs else ""
    description = normalize_text(paragraphs[1].get_text()) if len(paragraphs) > 1 else ""

    label = anchor.select_one("span.capitalize")
    category_text = normalize_text(label.get_text()) if label else ""
    category = _TRAILING_SEPARATOR.sub("", category_text) or DEFAULT_CATEGORY

    date = ""
    time_el = anchor.find("time")
    if time_el is not None:
        date = time_el.get("datetime") or normalize_text(time_el.get_text())

    return _post_or_none(
        title=title,
        link=urljoin(site_url, href),
        description=description,
        category=category,
        date=date,
    )


def parse_card_listing(html: str, site_url: str) -> list[Post]:
    """Extract posts from card links scoped to <article> elements."""
    soup = BeautifulSoup(html, "html.parser")
    posts: list[Post] = []

    for anchor in soup.select(f'article a[href^="{BLOG_PATH}/"]'):
        if is_navigation_link(anchor.get("href")):
            continue
        post = _card_post(anchor, site_url)
        if post is not None:
            posts.append(post)

    return posts


def parse_text_listing(html: str, site_url: str) -> list[Post]:
    """Recover posts from plain blog links by splitting their text into lines.

    The last line is expected to read ``"<category> · <date>"``.
    """
    soup = BeautifulSoup(html, "html.parser")
    posts: list[Post] = []

    for anchor in soup.select(f'a[href^="{BLOG_PATH}/"]'):
        href = anchor.get("href")
        if is_navigation_link(href):
            continue

        lines = split_lines(anchor)
        if len(lines) < 2:
            continue

        description = " ".join(lines[1:-1])
        meta_match = _META_LINE.match(lines[-1])

        post = _post_or_none(
            title=lines[0],
            link=urljoin(site_url, href),
            description=description,
            category=meta_match.group(1) if meta_match else DEFAULT_CATEGORY,
            date=meta_match.group(2) if meta_match else "",
        )
        if post is not None:
            posts.append(post)

    return posts


def parse_blog_listing(html: str, site_url: str) -> list[Post]:
    """Card parser first, text-splitting parser when no card matched."""
    posts = parse_card_listing(html, site_url)
    if posts:
        return posts
    return parse_text_listing(html, site_url)
