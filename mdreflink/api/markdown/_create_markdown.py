"""Markdown instance factory."""

from marko import Markdown

from ._REFLINK_EXTENSION import REFLINK_EXTENSION
from .MarkdownRenderer import MarkdownRenderer


def _create_markdown() -> Markdown:
    """Create a parser/renderer pair. marko instances are not thread-safe, so build one per call."""
    return Markdown(renderer=MarkdownRenderer, extensions=[REFLINK_EXTENSION])
