"""Inline link element."""

from __future__ import annotations

from typing import TYPE_CHECKING

from marko import inline

from .LinkReference import LinkReference
from .Position import Position

if TYPE_CHECKING:
    from marko.inline_parser import _Match


class Link(inline.Link):
    """Inline link ``[text](destination "title")``.

    marko resolves ``[text][label]``, ``[text][]`` and ``[text]`` against the
    document's definitions and hands them over as links whose destination
    group is empty and starts right after the closing bracket of the text.
    Those matches are built as ``LinkReference`` nodes instead, so the
    reference form survives a parse/render round trip.
    """

    override = True
    position: Position | None = None

    def __new__(cls, match: _Match) -> Link | LinkReference:  # type: ignore[misc]
        label_start = match.end(1) + 1
        if match.start(2) != label_start:
            return super().__new__(cls)

        tail = match.group(0)[label_start - match.start() :]
        if not tail:
            return LinkReference(match.group(1), "shortcut")
        if tail == "[]":
            return LinkReference(match.group(1), "collapsed")
        return LinkReference(tail[1:-1], "full")

    @classmethod
    def create(cls, dest: str, title: str | None, children: list[inline.InlineElement]) -> Link:
        """Build a link outside of parsing."""
        link = object.__new__(cls)
        link.dest = dest
        link.title = title
        link.children = children
        link.dest_span = None
        link.title_span = None
        return link
