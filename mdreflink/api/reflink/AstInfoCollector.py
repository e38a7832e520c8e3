"""Single-pass index of links, definitions and headings."""

from marko import block, inline
from marko.element import Element

from ..markdown.LinkReference import LinkReference
from ._HEADING_TYPES import HEADING_TYPES
from .DefinitionRecord import DefinitionRecord
from .extract_link_text import extract_link_text
from .HeadingRecord import HeadingRecord
from .LinkRecord import LinkRecord
from .normalize_identifier import normalize_identifier
from .walk import walk


class AstInfoCollector:
    """Collect everything the link passes need in one pre-order walk.

    The walk never mutates the tree. Sequence counters belong to the
    instance, so every collection numbers links and headings from 1.

    Links are grouped by identity, their whitespace-collapsed text. Case is
    kept, so ``[Foo]`` and ``[foo]`` are separate identities. Links with an
    empty identity are skipped.

    Attributes:
        links: Every link record in traversal order
        links_by_identity: Link records grouped by identity
        definitions: Every definition node, duplicates included
        definitions_by_identifier: First definition per normalized identifier
        headings: Heading records in document order
        heading_ids: Heading node -> heading id
    """

    def __init__(self) -> None:
        self._id_seq = 0
        self._heading_seq = 0
        self._link_ids: dict[str, int] = {}
        self.links: list[LinkRecord] = []
        self.links_by_identity: dict[str, list[LinkRecord]] = {}
        self.definitions: list[DefinitionRecord] = []
        self.definitions_by_identifier: dict[str, DefinitionRecord] = {}
        self.headings: list[HeadingRecord] = []
        self.heading_ids: dict[Element, int] = {}

    def collect(self, tree: block.Document) -> "AstInfoCollector":
        """Index ``tree`` and return ``self``."""
        for node, parent in walk(tree):
            if isinstance(node, block.LinkRefDef):
                self._add_definition(node, parent)
            elif isinstance(node, HEADING_TYPES):
                self._add_heading(node)
            elif isinstance(node, (inline.Link, LinkReference)):
                self._add_link(node, parent)
        return self

    def _add_definition(self, node: block.LinkRefDef, parent: Element | None) -> None:
        record = DefinitionRecord(identifier=normalize_identifier(node.label), elem=node, parent=parent)
        self.definitions.append(record)
        self.definitions_by_identifier.setdefault(record.identifier, record)

    def _add_heading(self, node: Element) -> None:
        self._heading_seq += 1
        self.headings.append(HeadingRecord(id=self._heading_seq, elem=node))
        self.heading_ids[node] = self._heading_seq

    def _add_link(self, node: inline.Link | LinkReference, parent: Element | None) -> None:
        identity = extract_link_text(node)
        if not identity:
            return

        link_id = self._link_ids.get(identity)
        if link_id is None:
            self._id_seq += 1
            link_id = self._link_ids[identity] = self._id_seq

        record = LinkRecord(
            id=link_id,
            heading_id=self._heading_seq or None,
            elem=node,
            parent=parent,
            identity=identity,
        )
        self.links.append(record)
        self.links_by_identity.setdefault(identity, []).append(record)
