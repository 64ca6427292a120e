"""Syndication feeds generated from scraped blog listing pages."""

__version__ = "0.1.0"
