"""Link identity extraction."""

from marko.element import Element

from ..markdown.render_inline import render_inline
from .normalize_text import normalize_text


def extract_link_text(node: Element) -> str:
    """Return the identity of a link: its inner Markdown, whitespace-normalized.

    Inline formatting is kept, so ``[*a*](x)`` has identity ``*a*``.
    """
    return normalize_text(render_inline(node))
