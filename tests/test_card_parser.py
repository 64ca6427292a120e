"""Tests for the card and text-splitting listing parsers."""

from blog_feeds.adapters.parsers import (
    is_navigation_link,
    parse_blog_listing,
    parse_card_listing,
    parse_text_listing,
)
from blog_feeds.core import Post

SITE = "https://cursor.com"

CARD_HTML = """
<html><body>
  <article>
    <a href="/blog/example">
      <p>Example Title</p>
      <p>Example description</p>
      <span class="capitalize">News · </span>
      <time dateTime="2025-11-13">Nov 13, 2025</time>
    </a>
  </article>
</body></html>
"""


def test_parse_card_listing() -> None:
    """Test extracting a single card."""
    posts = parse_card_listing(CARD_HTML, SITE)

    assert posts == [
        Post(
            title="Example Title",
            link="https://cursor.com/blog/example",
            description="Example description",
            category="News",
            date="2025-11-13",
        )
    ]


def test_parse_card_listing_defaults() -> None:
    """Test category fallback and visible time text when attributes are missing."""
    html = """
    <article>
      <a href="/blog/second">
        <p>  Second
           Title </p>
        <time>Oct 1, 2025</time>
      </a>
    </article>
    """

    posts = parse_card_listing(html, SITE)

    assert len(posts) == 1
    assert posts[0].title == "Second Title"
    assert posts[0].description == ""
    assert posts[0].category == "post"
    assert posts[0].date == "Oct 1, 2025"


def test_parse_card_listing_skips_navigation() -> None:
    """Test pagination and topic links never become posts."""
    html = """
    <article>
      <a href="/blog/page/2"><p>Next page of posts</p></a>
      <a href="/blog/topic/ai"><p>Artificial intelligence</p></a>
    </article>
    """

    assert parse_card_listing(html, SITE) == []
    assert parse_text_listing(html, SITE) == []


def test_parse_text_listing_keeps_inline_markup_in_title() -> None:
    """Test inline code inside the title line is not split off."""
    html = '<a href="/blog/rules">Using <code>cursor</code> rules\nNews · Nov 13, 2025</a>'

    posts = parse_text_listing(html, SITE)

    assert len(posts) == 1
    assert posts[0].title == "Using cursor rules"
    assert posts[0].category == "News"
    assert posts[0].date == "Nov 13, 2025"


def test_parse_text_listing_adjacent_spans_are_one_line() -> None:
    """Test elements without a newline between them count as a single line."""
    html = '<a href="/blog/x"><span>Title here</span><span>News · Nov 13, 2025</span></a>'

    assert parse_text_listing(html, SITE) == []


def test_parse_card_listing_skips_incomplete_cards() -> None:
    """Test cards without a title paragraph are dropped."""
    html = '<article><a href="/blog/empty"><span>No paragraphs</span></a></article>'

    assert parse_card_listing(html, SITE) == []


def test_parse_card_listing_ignores_links_outside_articles() -> None:
    """Test only anchors inside article elements are considered."""
    html = '<div><a href="/blog/loose"><p>Loose Title</p></a></div>'

    assert parse_card_listing(html, SITE) == []


def test_is_navigation_link() -> None:
    """Test navigation detection."""
    assert is_navigation_link("/blog")
    assert is_navigation_link("/blog/page/3")
    assert is_navigation_link("/blog/topic/research")
    assert is_navigation_link(None)
    assert not is_navigation_link("/blog/composer")


def test_parse_text_listing() -> None:
    """Test the text-splitting fallback."""
    html = """
    <div>
      <a href="/blog/fallback">
        Fallback Title
        First part of the summary
        second part
        Product · Nov 13, 2025
      </a>
    </div>
    """

    posts = parse_text_listing(html, SITE)

    assert len(posts) == 1
    post = posts[0]
    assert post.title == "Fallback Title"
    assert post.link == "https://cursor.com/blog/fallback"
    assert post.description == "First part of the summary second part"
    assert post.category == "Product"
    assert post.date == "Nov 13, 2025"


def test_parse_text_listing_unmatched_meta_line() -> None:
    """Test category defaults when the last line has no separator."""
    html = '<a href="/blog/plain">Plain Title\nNo separator here</a>'

    posts = parse_text_listing(html, SITE)

    assert len(posts) == 1
    assert posts[0].category == "post"
    assert posts[0].date == ""
    assert posts[0].description == ""


def test_parse_text_listing_requires_two_lines() -> None:
    """Test single-line anchors are skipped."""
    html = '<a href="/blog/short">Only a title</a>'

    assert parse_text_listing(html, SITE) == []


def test_parse_blog_listing_uses_fallback_only_when_cards_missing() -> None:
    """Test the fallback parser runs only when no cards matched."""
    fallback_html = '<a href="/blog/fallback">Fallback Title\nNews · Nov 13, 2025</a>'

    assert parse_blog_listing(CARD_HTML, SITE)[0].title == "Example Title"
    assert parse_blog_listing(fallback_html, SITE)[0].title == "Fallback Title"
    assert parse_blog_listing("<html></html>", SITE) == []


def test_parse_card_listing_site_with_trailing_slash() -> None:
    """Test links are joined cleanly with the site base."""
    posts = parse_card_listing(CARD_HTML, "https://cursor.com/")

    assert posts[0].link == "https://cursor.com/blog/example"
