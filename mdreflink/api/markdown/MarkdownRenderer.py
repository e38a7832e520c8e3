"""Markdown renderer for reference-link documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from marko import inline
from marko.md_renderer import MarkdownRenderer as _BaseMarkdownRenderer

from .format_destination import format_destination

if TYPE_CHECKING:
    from .Definition import Definition
    from .FrontMatter import FrontMatter
    from .Link import Link
    from .LinkReference import LinkReference


class MarkdownRenderer(_BaseMarkdownRenderer):
    """Render a document back to Markdown.

    Links keep the form they have in the tree: inline links are written with
    their destination, references as ``[text]``, ``[text][]`` or
    ``[text][label]``, definitions as ``[label]: destination "title"``.
    Everything else is left to marko's Markdown renderer.
    """

    def render_front_matter(self, element: FrontMatter) -> str:
        body = element.body
        return body if body.endswith("\n") else body + "\n"

    def render_link(self, element: Link) -> str:
        text = self.render_children(element)
        return f"[{text}]({format_destination(element.dest)}{_format_title(element.title)})"

    def render_image(self, element: inline.Image) -> str:
        text = self.render_children(element)
        return f"![{text}]({format_destination(element.dest)}{_format_title(element.title)})"

    def render_link_reference(self, element: LinkReference) -> str:
        text = self.render_children(element)
        if element.reference_type == "full":
            return f"[{text}][{element.label}]"
        if element.reference_type == "collapsed":
            return f"[{text}][]"
        return f"[{text}]"

    def render_link_ref_def(self, element: Definition) -> str:  # type: ignore[override]
        line = (
            f"{self._prefix}[{element.label}]: "
            f"{format_destination(element.dest)}{_format_title(element.title)}\n"
        )
        self._prefix = self._second_prefix
        return line

    def render_raw_text(self, element: inline.RawText) -> str:
        # Code block bodies are unescaped raw text and handle their own prefixes.
        if not element.escape:
            return element.children
        return element.children.replace("\n", "\n" + self._second_prefix)

    def render_line_break(self, element: inline.LineBreak) -> str:
        return ("\n" if element.soft else "\\\n") + self._second_prefix


def _format_title(title: str | None) -> str:
    if not title:
        return ""
    escaped = title.replace("\\", "\\\\").replace('"', '\\"')
    return f' "{escaped}"'
