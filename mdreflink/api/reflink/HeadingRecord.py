"""Heading record dataclass (UNO: single model)."""

from dataclasses import dataclass

from marko.element import Element


@dataclass(eq=False)
class HeadingRecord:
    """A heading and its sequence number in document order (starting at 1)."""

    id: int
    elem: Element
