"""Core domain layer."""

from blog_feeds.core.dates import resolve_date
from blog_feeds.core.entities import Feed, FeedEntry, FeedMetadata, Post
from blog_feeds.core.interfaces import BlogSource, FeedEmitter, Fetcher, FetchError
from blog_feeds.core.merge import aggregate_posts, dedupe_posts, label_with_source
from blog_feeds.core.text import normalize_text

__all__ = [
    "Post",
    "Feed",
    "FeedEntry",
    "FeedMetadata",
    "BlogSource",
    "FeedEmitter",
    "Fetcher",
    "FetchError",
    "aggregate_posts",
    "dedupe_posts",
    "label_with_source",
    "normalize_text",
    "resolve_date",
]
