"""CLI entry point for blog feeds."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from blog_feeds.adapters.feeds import FeedgenEmitter
from blog_feeds.adapters.fetch import HttpFetcher
from blog_feeds.adapters.sources import default_sources
from blog_feeds.config import Settings, get_settings
from blog_feeds.use_cases import FeedService


def main(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
    max_pages: Optional[int] = typer.Option(None, "--max-pages", help="Pagination ceiling"),
) -> None:
    """Scrape blog listings and generate RSS, Atom and JSON feeds."""
    settings = get_settings(config)
    if output is not None:
        settings.paths.output_dir = output
    if max_pages is not None:
        settings.fetch.max_pages = max_pages

    asyncio.run(async_run(settings))


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(settings: Settings) -> None:
    """Async implementation of a full run."""
    print("\n" + "=" * 70)
    print("📡  BLOG FEEDS - RSS / Atom / JSON generator")
    print("=" * 70)

    sources = default_sources(max_pages=settings.max_pages)
    print(f"\n🔗 Sources: {', '.join(source.name for source in sources)}")

    async with HttpFetcher(
        timeout=settings.fetch.timeout,
        user_agent=settings.fetch.user_agent,
    ) as fetcher:
        service = FeedService(
            sources=sources,
            fetch=fetcher,
            emitter=FeedgenEmitter(),
            settings=settings,
        )
        await service.run(settings.output_dir)

    print("\n" + "=" * 70)
    print("✅ DONE!")
    print("=" * 70)
    print(f"📄 Feeds generated in: {settings.output_dir}/")
    print()


if __name__ == "__main__":
    app()
