"""Rewrite links into shortcut references or back into inline links."""

import logging

from marko import inline

from ..markdown.Link import Link
from ..markdown.LinkReference import LinkReference
from ._child_index import _child_index
from .AstInfoCollector import AstInfoCollector
from .ConflictReport import ConflictReport
from .LinkRecord import LinkRecord
from .resolve_link import resolve_link
from .TransformStats import TransformStats

logger = logging.getLogger(__name__)


def rewrite_links(info: AstInfoCollector, report: ConflictReport, stats: TransformStats) -> None:
    """Mutate every collected link according to its identity's conflict status.

    - non-conflicting inline link: becomes a shortcut reference labelled with its identity
    - non-conflicting reference: relabelled with its identity, forced to shortcut form
    - conflicting reference: becomes an inline link with its definition's URL, if any
    - conflicting inline link: unchanged

    Identities without any resolved URL are left alone. Each record's ``elem``
    follows its replacement.
    """
    for record in info.links:
        link = record.elem
        if report.is_conflicting(record.id):
            if isinstance(link, LinkReference):
                url, title = resolve_link(link, info.definitions_by_identifier)
                if url is not None:
                    _replace(record, Link.create(url, title, link.children))
            continue

        if report.resolved_url(record.id) is None:
            continue

        if isinstance(link, LinkReference):
            if link.label != record.identity:
                link.label = record.identity
            link.reference_type = "shortcut"
        elif _replace(record, LinkReference(record.identity, "shortcut", link.children)):
            stats.links_converted += 1

    logger.debug(f"Converted {stats.links_converted} inline links to shortcut references")


def _replace(record: LinkRecord, replacement: inline.Link | LinkReference) -> bool:
    index = _child_index(record.parent, record.elem)
    if index is None:
        return False
    replacement.position = record.elem.position
    record.parent.children[index] = replacement  # type: ignore[union-attr]
    record.elem = replacement
    return True
