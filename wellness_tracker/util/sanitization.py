"""Sanitisation helpers.

Free-form text (habit and goal descriptions, mood notes) is stored as
typed by the user and later rendered by the web client. Strip HTML
tags and surrounding whitespace before storing it to reduce the risk
of XSS.
"""
import re
from typing import Optional

TAG_RE = re.compile(r"<[^>]+>")


def strip_tags(text: str) -> str:
    """Remove HTML tags from the given string.

    Parameters
    ----------
    text: str
        The input string that may contain HTML tags.

    Returns
    -------
    str
        The cleaned string with tags removed and whitespace trimmed.
    """
    if not text:
        return ""
    no_tags = TAG_RE.sub("", text)
    return no_tags.strip()


def clean_optional(text: Optional[str]) -> Optional[str]:
    """Like :func:`strip_tags`, but empty results become ``None``."""
    cleaned = strip_tags(text) if text else ""
    return cleaned or None
