"""Conflict detection over collected links."""

from .AstInfoCollector import AstInfoCollector
from .ConflictReport import ConflictReport
from .resolve_link import resolve_link


def detect_conflicts(info: AstInfoCollector) -> ConflictReport:
    """Group resolved URLs by link identity and flag identities with more than one."""
    report = ConflictReport()
    for record in info.links:
        urls = report.urls_by_id.setdefault(record.id, set())
        url, title = resolve_link(record.elem, info.definitions_by_identifier)
        if url is None:
            continue
        urls.add(url)
        if title:
            report.titles_by_id.setdefault(record.id, title)

    report.conflicting_ids = {link_id for link_id, urls in report.urls_by_id.items() if len(urls) > 1}
    return report
