"""Reference-form link element."""

from __future__ import annotations

from typing import Literal

from marko import inline
from marko.helpers import normalize_label

from .Position import Position

ReferenceType = Literal["full", "collapsed", "shortcut"]


class LinkReference(inline.InlineElement):
    """Reference link: ``[text][label]``, ``[text][]`` or ``[text]``.

    ``label`` keeps the label as written; ``identifier`` is the normalized
    form used to find the matching definition.
    """

    virtual = True
    parse_children = True
    position: Position | None = None

    def __init__(
        self,
        label: str,
        reference_type: ReferenceType = "shortcut",
        children: list[inline.InlineElement] | None = None,
    ) -> None:
        self.label = label
        self.reference_type = reference_type
        self.children = children if children is not None else []

    @property
    def identifier(self) -> str:
        return normalize_label(self.label)
