"""Transform statistics dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass
class TransformStats:
    """Counters reported by ``transform``."""

    links_converted: int = 0
    conflicts_found: int = 0
    definitions_added: int = 0
