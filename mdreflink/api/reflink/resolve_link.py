"""URL resolution for a link node."""

from marko import inline

from ..markdown.LinkReference import LinkReference
from .DefinitionRecord import DefinitionRecord
from .normalize_identifier import normalize_identifier


def resolve_link(
    elem: inline.Link | LinkReference, definitions: dict[str, DefinitionRecord]
) -> tuple[str | None, str | None]:
    """Return ``(url, title)`` for a link.

    Inline links carry their own URL; references use the definition with the
    same normalized identifier. Missing or empty URLs resolve to None.
    """
    if isinstance(elem, LinkReference):
        record = definitions.get(normalize_identifier(elem.label))
        if record is None:
            return None, None
        return record.elem.dest or None, record.elem.title or None
    return elem.dest or None, elem.title or None
