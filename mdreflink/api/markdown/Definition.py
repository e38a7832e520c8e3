"""Link reference definition element."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from marko import block, inline
from marko.helpers import normalize_label

if TYPE_CHECKING:
    from marko.source import Source


class Definition(block.LinkRefDef):
    """Definition ``[label]: destination "title"``.

    marko stores the destination and title as written. This element keeps
    the label as written too, but unwraps the destination (angle brackets,
    backslash escapes) and strips the quotes from the title so they compare
    equal to the values of an inline link.
    """

    override = True

    @classmethod
    def parse(cls, source: Source) -> Definition:
        label = source.context.linkref_info.link_label.text[1:-1]
        element = cast(Definition, super().parse(source))
        element.label = label
        element.dest = _unwrap_destination(element.dest)
        element.title = _unquote_title(element.title)
        return element

    @property
    def identifier(self) -> str:
        return normalize_label(self.label)


def _unwrap_destination(dest: str) -> str:
    if dest.startswith("<") and dest.endswith(">"):
        dest = dest[1:-1]
    return inline.Literal.strip_backslash(dest)


def _unquote_title(title: str | None) -> str | None:
    if not title:
        return None
    return inline.Literal.strip_backslash(title[1:-1])
