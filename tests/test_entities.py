"""Tests for core entities."""

from dataclasses import FrozenInstanceError

import pytest

from blog_feeds.core import Post


def test_post_creation() -> None:
    """Test creating a valid post."""
    post = Post(
        title="Example Title",
        link="https://cursor.com/blog/example",
        description="Example description",
        category="News",
        date="2025-11-13",
    )

    assert post.title == "Example Title"
    assert post.link == "https://cursor.com/blog/example"
    assert post.source is None


def test_post_defaults() -> None:
    """Test optional fields default to empty values."""
    post = Post(title="Title", link="https://example.com/blog/a")

    assert post.description == ""
    assert post.category == ""
    assert post.date == ""


def test_post_validation() -> None:
    """Test post validation."""
    with pytest.raises(ValueError, match="Title cannot be empty"):
        Post(title="", link="https://cursor.com/blog/example")

    with pytest.raises(ValueError, match="Link cannot be empty"):
        Post(title="Example", link="")


def test_post_is_immutable() -> None:
    """Test posts cannot be modified after creation."""
    post = Post(title="Example", link="https://cursor.com/blog/example")

    with pytest.raises(FrozenInstanceError):
        post.title = "Changed"  # type: ignore[misc]
