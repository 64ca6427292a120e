"""Core domain entities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Post:
    """One blog entry discovered on a listing page."""

    title: str
    link: str
    description: str = ""
    category: str = ""
    date: str = ""
    source: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Title cannot be empty")
        if not self.link:
            raise ValueError("Link cannot be empty")


@dataclass(frozen=True)
class FeedMetadata:
    """Channel-level information of an emitted feed."""

    title: str
    description: str
    id: str
    link: str
    language: str
    copyright: str
    updated: datetime
    rss_url: str
    atom_url: str
    json_url: str
    image: Optional[str] = None


@dataclass(frozen=True)
class FeedEntry:
    """Single item of an emitted feed, with its date already resolved."""

    title: str
    id: str
    link: str
    description: str
    categories: tuple[str, ...]
    date: datetime


@dataclass(frozen=True)
class Feed:
    """Metadata plus ordered entries, ready for serialization."""

    metadata: FeedMetadata
    entries: tuple[FeedEntry, ...]
