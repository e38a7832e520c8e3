"""Identifier normalization for definition matching."""

from .normalize_text import normalize_text


def normalize_identifier(label: str) -> str:
    """Normalize a label the way CommonMark matches labels: whitespace-collapsed and case-folded."""
    return normalize_text(label).casefold()
