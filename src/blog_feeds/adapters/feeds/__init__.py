"""Feed serialization adapters."""

from blog_feeds.adapters.feeds.feedgen_emitter import (
    ATOM_FILE,
    JSON_FILE,
    RSS_FILE,
    FeedgenEmitter,
)
from blog_feeds.adapters.feeds.index_page import IndexTarget, render_index_page

__all__ = [
    "ATOM_FILE",
    "JSON_FILE",
    "RSS_FILE",
    "FeedgenEmitter",
    "IndexTarget",
    "render_index_page",
]
