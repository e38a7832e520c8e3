"""Link record dataclass (UNO: single model)."""

from dataclasses import dataclass

from marko import inline
from marko.element import Element

from ..markdown.LinkReference import LinkReference


@dataclass(eq=False)
class LinkRecord:
    """One link occurrence found by ``AstInfoCollector``.

    ``elem`` is replaced when the link rewriter swaps the node, so later
    passes always see the node that is in the tree.
    """

    id: int
    heading_id: int | None  # None: before the first heading
    elem: inline.Link | LinkReference
    parent: Element | None
    identity: str
