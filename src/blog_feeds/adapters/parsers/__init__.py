"""HTML listing parsers."""

from blog_feeds.adapters.parsers.card_parser import (
    is_navigation_link,
    parse_blog_listing,
    parse_card_listing,
    parse_text_listing,
)
from blog_feeds.adapters.parsers.heuristic_parser import HeuristicListingParser, block_lines

__all__ = [
    "HeuristicListingParser",
    "block_lines",
    "is_navigation_link",
    "parse_blog_listing",
    "parse_card_listing",
    "parse_text_listing",
]
