"""Section-aware placement of link reference definitions."""

import logging

from marko import block
from marko.element import Element

from ..markdown.Definition import Definition
from ..markdown.LinkReference import LinkReference
from ._child_index import _child_index
from ._HEADING_TYPES import HEADING_TYPES
from .AstInfoCollector import AstInfoCollector
from .ConflictReport import ConflictReport
from .LinkRecord import LinkRecord
from .TransformStats import TransformStats
from .walk import walk

logger = logging.getLogger(__name__)


def place_definitions(
    tree: block.Document,
    info: AstInfoCollector,
    report: ConflictReport,
    stats: TransformStats,
) -> None:
    """Replace all original definitions with one definition per resolvable identity.

    The top-level children are split into sections at every heading (content
    before the first heading is its own section). Each identity that resolves
    to exactly one URL gets its definition at the end of the first section
    holding one of its references, sorted by label within the section and
    separated from the surrounding content by blank lines. Every emitted
    definition counts towards ``stats.definitions_added``.
    """
    _remove_definitions(tree, info)

    records = {record.elem: record for record in info.links if isinstance(record.elem, LinkReference)}
    satisfied: set[int] = set()
    sections = _split_sections(tree.children)
    children: list[Element] = []

    for number, section in enumerate(sections, start=1):
        staged = _stage_definitions(section, records, report, satisfied)
        definitions = sorted(staged.values(), key=lambda definition: definition.label)
        satisfied.update(staged)
        stats.definitions_added += len(definitions)
        children.extend(_attach(section, definitions, is_last=number == len(sections)))

    tree.children = children
    logger.debug(f"Placed definitions across {len(sections)} sections, {stats.definitions_added} definitions")


def _remove_definitions(tree: block.Document, info: AstInfoCollector) -> None:
    parents: list[Element] = []
    for record in info.definitions:
        index = _child_index(record.parent, record.elem)
        if index is None:
            continue
        del record.parent.children[index]  # type: ignore[union-attr]
        if not any(parent is record.parent for parent in parents):
            parents.append(record.parent)  # type: ignore[arg-type]

    for parent in parents:
        parent.children = _collapse_blank_lines(parent.children, strip_leading=parent is tree)  # type: ignore[attr-defined]


def _collapse_blank_lines(children: list[Element], strip_leading: bool) -> list[Element]:
    result: list[Element] = []
    for child in children:
        if isinstance(child, block.BlankLine):
            if result and isinstance(result[-1], block.BlankLine):
                continue
            if not result and strip_leading:
                continue
        result.append(child)
    return result


def _split_sections(children: list[Element]) -> list[list[Element]]:
    sections: list[list[Element]] = [[]]
    for child in children:
        if isinstance(child, HEADING_TYPES) and sections[-1]:
            sections.append([])
        sections[-1].append(child)
    return sections


def _stage_definitions(
    section: list[Element],
    records: dict[Element, LinkRecord],
    report: ConflictReport,
    satisfied: set[int],
) -> dict[int, Definition]:
    staged: dict[int, Definition] = {}
    for node in section:
        for descendant, _parent in walk(node):
            record = records.get(descendant)
            if record is None or record.id in satisfied or record.id in staged:
                continue
            url = report.resolved_url(record.id)
            if url is None:
                continue
            staged[record.id] = Definition(record.identity, url, report.titles_by_id.get(record.id))
    return staged


def _attach(section: list[Element], definitions: list[Definition], is_last: bool) -> list[Element]:
    content = list(section)
    if definitions or is_last:
        while content and isinstance(content[-1], block.BlankLine):
            content.pop()
    if not definitions:
        return content

    if content:
        content.append(block.BlankLine(0))
    content.extend(definitions)
    if not is_last:
        content.append(block.BlankLine(0))
    return content
