"""Locate a node in its parent's child list."""

from marko.element import Element


def _child_index(parent: Element | None, node: Element) -> int | None:
    """Index of ``node`` in ``parent.children`` compared by identity, or None."""
    if parent is None:
        return None
    children = getattr(parent, "children", None)
    if not isinstance(children, list):
        return None
    for index, child in enumerate(children):
        if child is node:
            return index
    return None
