"""Link transformation entry point."""

import logging

from marko import block

from ..config.ReflinkConfig import ReflinkConfig
from .AstInfoCollector import AstInfoCollector
from .detect_conflicts import detect_conflicts
from .place_definitions import place_definitions
from .reflow_links import reflow_links
from .rewrite_links import rewrite_links
from .TransformStats import TransformStats

logger = logging.getLogger(__name__)


def transform(tree: block.Document, config: ReflinkConfig | None = None) -> tuple[block.Document, TransformStats]:
    """Rewrite inline links in ``tree`` into shortcut references with collected definitions.

    Passes, in order: collect, detect conflicts, reflow (only when
    ``config.column_width`` is set), rewrite links, place definitions. Every
    pass works on the records built by the collector; only the rewrite and
    placement passes mutate the tree.

    Args:
        tree: Document parsed by ``parse_markdown``; mutated in place
        config: Transformation options (defaults to no reflow)

    Returns:
        The same tree and the statistics of this run
    """
    if config is None:
        config = ReflinkConfig()

    stats = TransformStats()
    info = AstInfoCollector().collect(tree)
    report = detect_conflicts(info)
    stats.conflicts_found = report.conflicts_found
    logger.debug(
        f"Collected {len(info.links)} links ({len(info.links_by_identity)} identities), "
        f"{len(info.definitions)} definitions, {len(info.headings)} headings; "
        f"{report.conflicts_found} conflicts"
    )

    if config.column_width is not None:
        reflow_links(info, report, config.column_width)

    rewrite_links(info, report, stats)
    place_definitions(tree, info, report, stats)
    return tree, stats
