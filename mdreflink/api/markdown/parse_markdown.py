"""Parse Markdown text into a document tree."""

from marko import block, inline

from ._create_markdown import _create_markdown
from .LinkReference import LinkReference
from .Position import Position


def parse_markdown(text: str) -> block.Document:
    """Parse ``text`` and stamp source positions onto every link.

    Links (``Link`` and ``LinkReference``) get a ``position`` attribute with
    1-based line/column points computed from marko's source spans.
    """
    document = _create_markdown().parse(text)
    line_starts = _line_starts(normalize_line_endings(text))
    _stamp_positions(document, line_starts)
    return document


def normalize_line_endings(text: str) -> str:
    """Apply the same line terminator normalization marko applies before parsing."""
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")


def _line_starts(text: str) -> list[int]:
    starts = [0]
    index = text.find("\n")
    while index >= 0:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return starts


def _stamp_positions(element: object, line_starts: list[int]) -> None:
    if isinstance(element, (inline.Link, LinkReference)) and element.source_span is not None:
        element.position = Position.from_span(line_starts, element.source_span)
    children = getattr(element, "children", None)
    if isinstance(children, list):
        for child in children:
            _stamp_positions(child, line_starts)
