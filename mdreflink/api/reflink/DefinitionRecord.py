"""Definition record dataclass (UNO: single model)."""

from dataclasses import dataclass

from marko import block
from marko.element import Element


@dataclass(eq=False)
class DefinitionRecord:
    """An original definition node and where it sits."""

    identifier: str
    elem: block.LinkRefDef
    parent: Element | None
