"""Claude and Anthropic listings, scraped with line-classification heuristics."""

from blog_feeds.adapters.parsers import HeuristicListingParser
from blog_feeds.adapters.sources.base import SinglePageBlogSource
from blog_feeds.core import Post

ANTHROPIC_IMAGE = "https://www.anthropic.com/favicon.ico"


class _AnthropicSource(SinglePageBlogSource):
    parser: HeuristicListingParser
    image = ANTHROPIC_IMAGE

    def __init__(self) -> None:
        self.copyright = f"© {self.year()} Anthropic PBC"

    def parse(self, html: str) -> list[Post]:
        return self.parser(html, self.site_url)


class ClaudeBlogSource(_AnthropicSource):
    """Product posts from claude.com/blog."""

    emoji = "✳️"
    name = "Claude Blog"
    slug = "claude"
    listing_url = "https://claude.com/blog"
    site_url = "https://claude.com"
    description = "Product news and updates from the Claude blog"
    image = "https://claude.com/favicon.ico"
    parser = HeuristicListingParser(
        path_segments=("/blog/",),
        fallback_category="Blog",
        categories=frozenset({
            "Agents",
            "Announcements",
            "Claude Code",
            "Claude apps",
            "Coding",
            "Customer stories",
            "Education",
            "Enterprise AI",
            "Financial services",
            "Product announcements",
            "Skills",
        }),
        min_title_length=10,
    )


class AnthropicEngineeringSource(_AnthropicSource):
    """Engineering write-ups from anthropic.com/engineering."""

    emoji = "🛠️"
    name = "Anthropic Engineering"
    slug = "anthropic-engineering"
    listing_url = "https://www.anthropic.com/engineering"
    site_url = "https://www.anthropic.com"
    description = "Engineering articles from the team building Claude"
    parser = HeuristicListingParser(
        path_segments=("/engineering/",),
        fallback_category="Engineering",
        categories=frozenset({
            "Agents",
            "Claude Code",
            "Evals",
            "Infrastructure",
            "Tools",
        }),
        min_title_length=10,
    )


class AnthropicResearchSource(_AnthropicSource):
    """Research papers and announcements from anthropic.com/research."""

    emoji = "🔬"
    name = "Anthropic Research"
    slug = "anthropic-research"
    listing_url = "https://www.anthropic.com/research"
    site_url = "https://www.anthropic.com"
    description = "Research from Anthropic on AI safety, interpretability and alignment"
    parser = HeuristicListingParser(
        path_segments=("/research/", "/news/"),
        fallback_category="Research",
        categories=frozenset({
            "Alignment",
            "Announcements",
            "Economic Research",
            "Interpretability",
            "Policy",
            "Product",
            "Societal Impacts",
        }),
        min_title_length=15,
    )
