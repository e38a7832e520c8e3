"""Markdown parser/serializer built on marko.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .Definition import Definition
from .format_destination import format_destination
from .FrontMatter import FrontMatter
from .Link import Link
from .LinkReference import LinkReference
from .parse_markdown import parse_markdown
from .Point import Point
from .Position import Position
from .render_inline import render_inline
from .render_markdown import render_markdown

__all__ = [
    "Definition",
    "FrontMatter",
    "Link",
    "LinkReference",
    "Point",
    "Position",
    "format_destination",
    "parse_markdown",
    "render_inline",
    "render_markdown",
]
