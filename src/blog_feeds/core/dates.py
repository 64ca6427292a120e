"""Resolution of free-form listing dates into timezone-aware instants."""

from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateutil_parser


def resolve_date(value: Optional[str], now: Optional[datetime] = None) -> datetime:
    """Parse a date string found on a listing page.

    Handles "Nov 13, 2025", "November 13, 2025" and ISO 8601 values such as
    the ``datetime`` attribute of ``<time>`` elements. Naive results are
    taken as UTC.

    Never raises: empty or unparseable input resolves to ``now``, which
    defaults to the current UTC instant. Posts with such dates therefore
    sort as if they were published at resolution time.
    """
    fallback = now or datetime.now(timezone.utc)

    text = (value or "").strip()
    if not text:
        return fallback

    try:
        parsed = dateutil_parser.parse(text)
    except (ValueError, OverflowError):
        return fallback

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
