"""RSS, Atom and JSON Feed serialization."""

import json
from pathlib import Path

from feedgen.feed import FeedGenerator

from blog_feeds.core import Feed, FeedEmitter

RSS_FILE = "rss.xml"
ATOM_FILE = "atom.xml"
JSON_FILE = "feed.json"
JSON_FEED_VERSION = "https://jsonfeed.org/version/1.1"


class FeedgenEmitter(FeedEmitter):
    """Write feeds with feedgen (RSS 2.0, Atom 1.0) and json (JSON Feed)."""

    def emit(self, feed: Feed, directory: Path) -> list[Path]:
        """Write the three feed documents, returning their paths."""
        directory.mkdir(parents=True, exist_ok=True)

        rss_path = directory / RSS_FILE
        atom_path = directory / ATOM_FILE
        json_path = directory / JSON_FILE

        rss_path.write_bytes(self.render_rss(feed))
        atom_path.write_bytes(self.render_atom(feed))
        json_path.write_text(self.render_json(feed), encoding="utf-8")

        return [rss_path, atom_path, json_path]

    def render_rss(self, feed: Feed) -> bytes:
        return self._generator(feed, feed.metadata.rss_url).rss_str(pretty=True)

    def render_atom(self, feed: Feed) -> bytes:
        return self._generator(feed, feed.metadata.atom_url).atom_str(pretty=True)

    def render_json(self, feed: Feed) -> str:
        meta = feed.metadata
        document = {
            "version": JSON_FEED_VERSION,
            "title": meta.title,
            "home_page_url": meta.link,
            "feed_url": meta.json_url,
            "description": meta.description,
            "language": meta.language,
            "items": [
                {
                    "id": entry.id,
                    "url": entry.link,
                    "title": entry.title,
                    "summary": entry.description,
                    "content_html": entry.description,
                    "date_published": entry.date.isoformat(),
                    "date_modified": entry.date.isoformat(),
                    "tags": list(entry.categories),
                }
                for entry in feed.entries
            ],
        }
        if meta.image:
            document["icon"] = meta.image
            document["favicon"] = meta.image

        return json.dumps(document, indent=2, ensure_ascii=False)

    def _generator(self, feed: Feed, self_url: str) -> FeedGenerator:
        """Build a generator whose rel=self link points at ``self_url``."""
        meta = feed.metadata

        fg = FeedGenerator()
        fg.id(meta.id)
        fg.title(meta.title)
        # RSS requires a non-empty channel description
        fg.description(meta.description or meta.title)
        fg.link(href=meta.link, rel="alternate")
        fg.link(href=self_url, rel="self")
        fg.language(meta.language)
        fg.rights(meta.copyright)
        fg.updated(meta.updated)
        if meta.image:
            fg.image(meta.image)
            fg.icon(meta.image)

        for entry in feed.entries:
            fe = fg.add_entry(order="append")
            fe.id(entry.id)
            fe.guid(entry.id, permalink=True)
            fe.title(entry.title)
            fe.link(href=entry.link)
            if entry.description:
                fe.description(entry.description, isSummary=True)
            for category in entry.categories:
                fe.category(term=category)
            fe.published(entry.date)
            fe.updated(entry.date)

        return fg
