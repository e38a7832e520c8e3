"""Conflict report dataclass (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass
class ConflictReport:
    """Resolved URLs per link identity id.

    An identity is conflicting when it resolves to two or more distinct URLs.
    An identity with no resolved URL is not conflicting; it just cannot get a
    definition.
    """

    urls_by_id: dict[int, set[str]] = field(default_factory=dict)
    titles_by_id: dict[int, str] = field(default_factory=dict)
    conflicting_ids: set[int] = field(default_factory=set)

    @property
    def conflicts_found(self) -> int:
        return len(self.conflicting_ids)

    def is_conflicting(self, link_id: int) -> bool:
        return link_id in self.conflicting_ids

    def resolved_url(self, link_id: int) -> str | None:
        """The single URL of an identity, or None if it has zero or several."""
        urls = self.urls_by_id.get(link_id, set())
        if len(urls) != 1:
            return None
        return next(iter(urls))
