"""Inline-to-reference link transformation.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .AstInfoCollector import AstInfoCollector
from .cmd_reflink import cmd_reflink
from .ConflictReport import ConflictReport
from .DefinitionRecord import DefinitionRecord
from .detect_conflicts import detect_conflicts
from .extract_link_text import extract_link_text
from .HeadingRecord import HeadingRecord
from .LinkRecord import LinkRecord
from .normalize_identifier import normalize_identifier
from .normalize_text import normalize_text
from .place_definitions import place_definitions
from .reflow_links import reflow_links
from .resolve_link import resolve_link
from .rewrite_links import rewrite_links
from .transform import transform
from .transform_text import transform_text
from .TransformStats import TransformStats
from .walk import walk

__all__ = [
    "AstInfoCollector",
    "ConflictReport",
    "DefinitionRecord",
    "HeadingRecord",
    "LinkRecord",
    "TransformStats",
    "cmd_reflink",
    "detect_conflicts",
    "extract_link_text",
    "normalize_identifier",
    "normalize_text",
    "place_definitions",
    "reflow_links",
    "resolve_link",
    "rewrite_links",
    "transform",
    "transform_text",
    "walk",
]
