"""Render a document tree back to Markdown text."""

from marko import block

from ._create_markdown import _create_markdown


def render_markdown(document: block.Document) -> str:
    """Serialize ``document`` with the reference-link aware renderer."""
    return _create_markdown().render(document)
