"""Text cleanup for fragments pulled out of the DOM."""

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()
