"""Point dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 1-based line/column location in Markdown source."""

    line: int
    column: int
