"""Configuration management."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_TIMEOUT = 20.0
DEFAULT_USER_AGENT = "BlogFeedsRSS/1.0"


@dataclass
class PathsConfig:
    """Path settings."""
    output_dir: Path = Path("dist")


@dataclass
class FetchConfig:
    """HTTP fetch settings."""
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    max_pages: int = 100


@dataclass
class FeedsConfig:
    """Feed metadata settings."""
    public_url: str = "https://dasconnor.github.io/cursor-blog-rss"
    language: str = "en"
    legacy_source: str = "cursor"
    aggregate_slug: str = "all"
    aggregate_title: str = "AI Lab Blogs"
    aggregate_description: str = "Combined feed of Cursor, Claude and Anthropic blog posts"
    aggregate_copyright: str = "Copyright belongs to the respective publishers"


@dataclass
class Settings:
    """Application settings."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    feeds: FeedsConfig = field(default_factory=FeedsConfig)

    @property
    def output_dir(self) -> Path:
        return self.paths.output_dir

    @property
    def max_pages(self) -> int:
        return self.fetch.max_pages

    def feed_url(self, path: str, filename: str) -> str:
        """Public URL of a generated document; ``path`` is "" for the root."""
        base = self.feeds.public_url.rstrip("/")
        path = path.strip("/")
        return f"{base}/{path}/{filename}" if path else f"{base}/{filename}"


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config."""
    config = load_config(config_path)
    settings = Settings()

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    if "fetch" in config:
        for key, value in config["fetch"].items():
            setattr(settings.fetch, key, value)

    if "feeds" in config:
        for key, value in config["feeds"].items():
            setattr(settings.feeds, key, value)

    return settings
