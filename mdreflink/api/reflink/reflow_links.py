"""Wrap long link text so shortcut references fit a column budget."""

import logging
import textwrap

from marko import inline

from ..markdown.render_inline import render_inline
from .AstInfoCollector import AstInfoCollector
from .ConflictReport import ConflictReport
from .extract_link_text import extract_link_text
from .LinkRecord import LinkRecord

logger = logging.getLogger(__name__)

# Narrower than this, wrapping produces mostly one-word lines.
MIN_REFLOW_WIDTH = 10


def reflow_links(info: AstInfoCollector, report: ConflictReport, column_width: int) -> int:
    """Wrap the text of inline links whose ``[text]`` form would overflow ``column_width``.

    Runs before the rewrite, on the original nodes. Only inline links that
    will become shortcut references are considered. The output column is
    estimated per source line: the gap between two links stands for the
    unchanged text between them, and each link counts with its rewritten
    length. The estimate is approximate.

    Returns:
        Number of links whose text was wrapped
    """
    lines: dict[int, list[LinkRecord]] = {}
    for record in info.links:
        position = getattr(record.elem, "position", None)
        if position is not None:
            lines.setdefault(position.start.line, []).append(record)

    wrapped = 0
    for records in lines.values():
        records.sort(key=lambda record: record.elem.position.start.column)
        current_column = 0
        last_end_column = 1
        for record in records:
            link = record.elem
            if not isinstance(link, inline.Link) or report.resolved_url(record.id) is None:
                continue

            current_column += link.position.start.column - last_end_column
            if current_column + len(extract_link_text(link)) + 2 > column_width:
                wrapped += _wrap_link(link, column_width - current_column - 2)

            last_line = render_inline(link).strip().rsplit("\n", 1)[-1]
            current_column += len(last_line) + 2
            last_end_column = link.position.end.column

    logger.debug(f"Reflow at width {column_width}: wrapped {wrapped} links")
    return wrapped


def _wrap_link(link: inline.Link, available_width: int) -> int:
    if available_width < MIN_REFLOW_WIDTH:
        return 0
    if not all(_is_plain_text(child) for child in link.children):
        return 0

    words = "".join(child.children if isinstance(child, inline.RawText) else " " for child in link.children).split()
    if len(words) < 2:
        return 0

    lines = textwrap.wrap(" ".join(words), width=available_width, break_long_words=False, break_on_hyphens=False)
    if len(lines) < 2:
        return 0
    link.children = [inline.RawText("\n".join(lines))]
    return 1


def _is_plain_text(child: object) -> bool:
    return isinstance(child, inline.RawText) or (isinstance(child, inline.LineBreak) and child.soft)
