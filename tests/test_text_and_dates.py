"""Tests for text normalization and date resolution."""

from datetime import datetime, timedelta, timezone

import pytest

from blog_feeds.core import normalize_text, resolve_date


def test_normalize_text_collapses_whitespace() -> None:
    """Test runs of spaces, tabs and newlines become single spaces."""
    assert normalize_text("  Example \n\t  Title  ") == "Example Title"


def test_normalize_text_empty() -> None:
    """Test empty and missing input."""
    assert normalize_text("") == ""
    assert normalize_text("   \n ") == ""
    assert normalize_text(None) == ""


@pytest.mark.parametrize(
    "value",
    ["Nov 13, 2025", "November 13, 2025", "2025-11-13"],
)
def test_resolve_date_formats(value: str) -> None:
    """Test common listing date formats."""
    assert resolve_date(value) == datetime(2025, 11, 13, tzinfo=timezone.utc)


def test_resolve_date_iso_with_offset() -> None:
    """Test ISO timestamps are converted to UTC."""
    resolved = resolve_date("2025-11-13T10:00:00+02:00")

    assert resolved == datetime(2025, 11, 13, 8, 0, tzinfo=timezone.utc)
    assert resolved.tzinfo is not None


@pytest.mark.parametrize("value", ["", "not a date", None])
def test_resolve_date_falls_back_to_now(value) -> None:
    """Test unparseable dates resolve to the current instant."""
    before = datetime.now(timezone.utc)
    resolved = resolve_date(value)
    after = datetime.now(timezone.utc)

    assert before - timedelta(seconds=1) <= resolved <= after + timedelta(seconds=1)


def test_resolve_date_uses_given_reference() -> None:
    """Test the fallback instant can be supplied by the caller."""
    reference = datetime(2030, 1, 1, tzinfo=timezone.utc)

    assert resolve_date("gibberish", now=reference) == reference
    assert resolve_date("Jan 2, 2024", now=reference) == datetime(2024, 1, 2, tzinfo=timezone.utc)
