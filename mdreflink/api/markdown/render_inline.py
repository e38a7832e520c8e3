"""Render the children of an element to Markdown."""

from marko.element import Element

from .MarkdownRenderer import MarkdownRenderer


def render_inline(element: Element) -> str:
    """Render the children of ``element`` (e.g. the text of a link) as Markdown."""
    with MarkdownRenderer() as renderer:
        return renderer.render_children(element)
