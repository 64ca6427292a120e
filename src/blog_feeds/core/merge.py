"""Deduplication and cross-source aggregation of posts."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable, Optional

from blog_feeds.core.dates import resolve_date
from blog_feeds.core.entities import Post


def dedupe_posts(posts: Iterable[Post]) -> list[Post]:
    """Drop repeated links, keeping the first occurrence in input order."""
    seen: set[str] = set()
    unique: list[Post] = []

    for post in posts:
        if post.link in seen:
            continue
        seen.add(post.link)
        unique.append(post)

    return unique


def label_with_source(post: Post) -> Post:
    """Prefix the title with the source tag used in the combined feed."""
    if not post.source:
        return post
    return replace(post, title=f"[{post.source}] {post.title}")


def aggregate_posts(
    post_lists: Iterable[Iterable[Post]], now: Optional[datetime] = None
) -> list[Post]:
    """Merge per-source lists into one newest-first list.

    Links are unique across the result. Every date is resolved against the
    same ``now`` so that posts without a usable date tie and keep their
    relative input order (``list.sort`` is stable).
    """
    reference = now or datetime.now(timezone.utc)

    merged: list[Post] = []
    for posts in post_lists:
        merged.extend(posts)

    combined = [label_with_source(post) for post in dedupe_posts(merged)]
    combined.sort(key=lambda post: resolve_date(post.date, reference), reverse=True)
    return combined
