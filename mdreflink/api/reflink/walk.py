"""Pre-order tree traversal."""

from collections.abc import Iterator

from marko.element import Element


def walk(node: Element, parent: Element | None = None) -> Iterator[tuple[Element, Element | None]]:
    """Yield ``(node, parent)`` for ``node`` and every descendant, parents first."""
    yield node, parent
    children = getattr(node, "children", None)
    if isinstance(children, list):
        for child in children:
            yield from walk(child, node)
