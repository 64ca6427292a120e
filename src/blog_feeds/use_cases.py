"""Business logic use cases."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from blog_feeds.adapters.feeds import (
    ATOM_FILE,
    JSON_FILE,
    RSS_FILE,
    IndexTarget,
    render_index_page,
)
from blog_feeds.config import Settings
from blog_feeds.core import (
    BlogSource,
    Feed,
    FeedEmitter,
    FeedEntry,
    FeedMetadata,
    Fetcher,
    Post,
    aggregate_posts,
    dedupe_posts,
    resolve_date,
)

INDEX_FILE = "index.html"


class FeedService:
    """Crawl every source and turn the results into feed documents."""

    def __init__(
        self,
        sources: list[BlogSource],
        fetch: Fetcher,
        emitter: FeedEmitter,
        settings: Optional[Settings] = None,
    ) -> None:
        self.sources = sources
        self.fetch = fetch
        self.emitter = emitter
        self.settings = settings or Settings()

    async def collect(self) -> dict[str, list[Post]]:
        """Crawl sources one by one; a failing source contributes no posts."""
        print("\n" + "=" * 70)
        print("📥 COLLECTING POSTS")
        print("=" * 70)

        posts_by_slug: dict[str, list[Post]] = {}

        for source in self.sources:
            print(f"\n{source.emoji} Crawling: {source.name} ({source.listing_url})")

            try:
                posts = dedupe_posts(await source.crawl(self.fetch))
                print(f"  └─ Found: {len(posts)} posts")
            except Exception as e:
                print(f"  └─ ❌ Error: {e}")
                posts = []

            posts_by_slug[source.slug] = posts

        total = sum(len(posts) for posts in posts_by_slug.values())
        print(f"\n✓ Total collected: {total} posts")

        return posts_by_slug

    def build_source_feed(
        self,
        source: BlogSource,
        posts: list[Post],
        updated: datetime,
        path: Optional[str] = None,
    ) -> Feed:
        """Feed for one source, published under ``path`` (defaults to its slug)."""
        feed_path = source.slug if path is None else path
        metadata = self._metadata(
            title=source.name,
            description=source.description,
            link=source.listing_url,
            copyright=source.copyright,
            updated=updated,
            path=feed_path,
            image=source.image,
        )
        entries = tuple(
            self._entry(post, (post.category,), updated) for post in posts
        )
        return Feed(metadata=metadata, entries=entries)

    def build_aggregate_feed(
        self, posts_by_slug: dict[str, list[Post]], updated: datetime
    ) -> Feed:
        """Combined newest-first feed with source-labelled titles."""
        feeds_config = self.settings.feeds
        posts = aggregate_posts(posts_by_slug.values(), now=updated)

        metadata = self._metadata(
            title=feeds_config.aggregate_title,
            description=feeds_config.aggregate_description,
            link=self.settings.feed_url("", INDEX_FILE),
            copyright=feeds_config.aggregate_copyright,
            updated=updated,
            path=feeds_config.aggregate_slug,
        )
        entries = tuple(
            self._entry(post, (post.source or "", post.category), updated)
            for post in posts
        )
        return Feed(metadata=metadata, entries=entries)

    def build_legacy_feed(
        self, posts_by_slug: dict[str, list[Post]], updated: datetime
    ) -> Optional[Feed]:
        """Root-level feed of the legacy source, or None if it is not configured."""
        slug = self.settings.feeds.legacy_source
        source = next((s for s in self.sources if s.slug == slug), None)
        if source is None:
            return None
        return self.build_source_feed(source, posts_by_slug.get(slug, []), updated, path="")

    def write_feeds(
        self,
        posts_by_slug: dict[str, list[Post]],
        output_dir: Path,
        updated: Optional[datetime] = None,
    ) -> list[Path]:
        """Emit per-source, aggregate and legacy feeds plus the index page."""
        updated = updated or datetime.now(timezone.utc)
        output_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        targets: list[IndexTarget] = []

        for source in self.sources:
            feed = self.build_source_feed(source, posts_by_slug.get(source.slug, []), updated)
            written.extend(self.emitter.emit(feed, output_dir / source.slug))
            targets.append(IndexTarget(
                title=source.name,
                description=source.description,
                path=source.slug,
                homepage=source.listing_url,
            ))

        aggregate = self.build_aggregate_feed(posts_by_slug, updated)
        aggregate_slug = self.settings.feeds.aggregate_slug
        written.extend(self.emitter.emit(aggregate, output_dir / aggregate_slug))
        targets.insert(0, IndexTarget(
            title=aggregate.metadata.title,
            description=aggregate.metadata.description,
            path=aggregate_slug,
            homepage=aggregate.metadata.link,
        ))

        legacy = self.build_legacy_feed(posts_by_slug, updated)
        if legacy is not None:
            written.extend(self.emitter.emit(legacy, output_dir))
            targets.append(IndexTarget(
                title=f"{legacy.metadata.title} (legacy root feed)",
                description=legacy.metadata.description,
                path="",
                homepage=legacy.metadata.link,
            ))
        else:
            print(f"⚠️  Legacy source '{self.settings.feeds.legacy_source}' is not configured")

        index_path = output_dir / INDEX_FILE
        index_path.write_text(render_index_page(targets, updated), encoding="utf-8")
        written.append(index_path)

        return written

    async def run(self, output_dir: Path) -> list[Path]:
        """Run one full crawl and write every feed."""
        posts_by_slug = await self.collect()

        print("\n" + "=" * 70)
        print("📝 WRITING FEEDS")
        print("=" * 70)

        written = self.write_feeds(posts_by_slug, output_dir)
        print(f"✓ Wrote {len(written)} files to {output_dir}")
        return written

    def _metadata(
        self,
        title: str,
        description: str,
        link: str,
        copyright: str,
        updated: datetime,
        path: str,
        image: Optional[str] = None,
    ) -> FeedMetadata:
        return FeedMetadata(
            title=title,
            description=description,
            id=link,
            link=link,
            language=self.settings.feeds.language,
            copyright=copyright,
            updated=updated,
            rss_url=self.settings.feed_url(path, RSS_FILE),
            atom_url=self.settings.feed_url(path, ATOM_FILE),
            json_url=self.settings.feed_url(path, JSON_FILE),
            image=image,
        )

    @staticmethod
    def _entry(post: Post, categories: tuple[str, ...], now: datetime) -> FeedEntry:
        return FeedEntry(
            title=post.title,
            id=post.link,
            link=post.link,
            description=post.description,
            categories=tuple(c for c in categories if c),
            date=resolve_date(post.date, now),
        )
