"""Page fetching adapters."""

from blog_feeds.adapters.fetch.http_fetcher import HttpFetcher

__all__ = ["HttpFetcher"]
