"""Position dataclass (UNO: single model)."""

from bisect import bisect_right
from dataclasses import dataclass

from .Point import Point


@dataclass(frozen=True)
class Position:
    """Source range of an element.

    The end point is one past the last character, so for ``[a](b)`` at the
    start of a line the range is column 1 to column 7.
    """

    start: Point
    end: Point

    @classmethod
    def from_span(cls, line_starts: list[int], span: tuple[int, int]) -> "Position":
        """Build a position from a ``(start, end)`` offset pair.

        Args:
            line_starts: Offsets of the first character of every line
            span: Offsets into the normalized source text
        """
        return cls(start=_to_point(line_starts, span[0]), end=_to_point(line_starts, span[1]))


def _to_point(line_starts: list[int], offset: int) -> Point:
    index = bisect_right(line_starts, offset) - 1
    return Point(line=index + 1, column=offset - line_starts[index] + 1)
