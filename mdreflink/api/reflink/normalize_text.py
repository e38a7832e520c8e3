"""Whitespace normalization for link text."""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse every run of whitespace to a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()
