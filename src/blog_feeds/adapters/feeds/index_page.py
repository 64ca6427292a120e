"""Static HTML index linking every generated feed."""

from dataclasses import dataclass
from datetime import datetime
from html import escape

from blog_feeds.adapters.feeds.feedgen_emitter import ATOM_FILE, JSON_FILE, RSS_FILE


@dataclass(frozen=True)
class IndexTarget:
    """One feed directory listed on the index page."""

    title: str
    description: str
    path: str
    homepage: str


def render_index_page(
    targets: list[IndexTarget], updated: datetime, title: str = "Blog RSS Feeds"
) -> str:
    """Render the index page; ``path`` is relative to the output root ("" for the root)."""
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        f"  <title>{escape(title)}</title>",
        '  <meta charset="utf-8">',
        "</head>",
        "<body>",
        f"  <h1>{escape(title)}</h1>",
    ]

    for target in targets:
        prefix = f"{target.path.strip('/')}/" if target.path.strip("/") else ""
        lines.extend([
            f"  <h2>{escape(target.title)}</h2>",
            f"  <p>{escape(target.description)}</p>",
            "  <ul>",
            f'    <li><a href="{escape(prefix + RSS_FILE)}">RSS 2.0</a></li>',
            f'    <li><a href="{escape(prefix + ATOM_FILE)}">Atom</a></li>',
            f'    <li><a href="{escape(prefix + JSON_FILE)}">JSON Feed</a></li>',
            "  </ul>",
            f'  <p><a href="{escape(target.homepage)}">Visit {escape(target.title)} →</a></p>',
        ])

    lines.extend([
        f"  <p>Last updated: {updated.isoformat()}</p>",
        "</body>",
        "</html>",
        "",
    ])
    return "\n".join(lines)
