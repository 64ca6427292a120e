"""Line-classification parser for listings without structured card markup."""

import re
from dataclasses import dataclass, field
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from blog_feeds.core import Post, normalize_text

DATE_PATTERN = re.compile(
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
    r"\.?\s+\d{1,2},?\s+\d{4}"
)
CALL_TO_ACTION = re.compile(r"^read\s+more\b", re.IGNORECASE)
BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "section", "table", "td",
    "th", "tr", "ul",
})


def _collect_text(node: Tag, chunks: list[str]) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            is_block = child.name in BLOCK_TAGS
            if is_block:
                chunks.append("\n")
            _collect_text(child, chunks)
            if is_block:
                chunks.append("\n")
        elif isinstance(child, NavigableString) and not isinstance(child, Comment):
            chunks.append(str(child))


def block_lines(element: Tag) -> list[str]:
    """Text lines of an element, broken at block-level tags and newlines.

    Inline runs such as ``<em>`` or ``<span>`` stay on the surrounding line.
    """
    chunks: list[str] = []
    _collect_text(element, chunks)
    lines = (normalize_text(line) for line in "".join(chunks).split("\n"))
    return [line for line in lines if line]


@dataclass(frozen=True)
class HeuristicListingParser:
    """Classify anchor text lines into date, category and title.

    An anchor qualifies when its href contains one of ``path_segments`` and
    is not the bare section root. Lines that are entirely a date give the
    date, lines equal to a known category label give the category, and the
    first remaining line longer than ``min_title_length`` that is not a
    "Read more" prompt gives the title. Other lines are ignored.
    """

    path_segments: tuple[str, ...]
    fallback_category: str
    categories: frozenset[str] = field(default_factory=frozenset)
    min_title_length: int = 10

    def __call__(self, html: str, site_url: str) -> list[Post]:
        soup = BeautifulSoup(html, "html.parser")
        known_categories = {c.lower(): c for c in self.categories}
        posts: list[Post] = []
        seen_links: set[str] = set()

        for anchor in soup.find_all("a", href=True):
            href = anchor["href"]
            if not self._is_post_link(href):
                continue

            link = urljoin(site_url, href)
            if link in seen_links:
                continue

            title = ""
            category = ""
            date = ""
            for line in block_lines(anchor):
                if DATE_PATTERN.fullmatch(line):
                    if not date:
                        date = line
                    continue
                if line.lower() in known_categories:
                    if not category:
                        category = known_categories[line.lower()]
                    continue
                if (
                    not title
                    and len(line) > self.min_title_length
                    and not CALL_TO_ACTION.match(line)
                ):
                    title = line

            if not title:
                continue

            seen_links.add(link)
            posts.append(Post(
                title=title,
                link=link,
                description="",
                category=category or self.fallback_category,
                date=date,
            ))

        return posts

    def _is_post_link(self, href: str) -> bool:
        if not any(segment in href for segment in self.path_segments):
            return False
        path = urlparse(href).path.rstrip("/")
        return all(path != segment.rstrip("/") for segment in self.path_segments)
