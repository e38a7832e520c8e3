"""Front matter block element."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Match

from marko import block

if TYPE_CHECKING:
    from marko.source import Source

FRONT_MATTER_PATTERN = re.compile(r"(---|\+\+\+)[^\n\S]*\n(?:[\s\S]*?\n)?\1[^\n\S]*(?:\n|\Z)")


class FrontMatter(block.BlockElement):
    """YAML (``---``) or TOML (``+++``) front matter.

    Only recognized at the very start of the document. The block is opaque:
    nothing inside it is parsed, and it is written back exactly as read.
    """

    priority = 9

    def __init__(self, match: Match[str]) -> None:
        self.body = match.group(0)
        self.kind = "yaml" if match.group(1) == "---" else "toml"

    @classmethod
    def match(cls, source: Source) -> Match[str] | None:
        if source.pos != 0 or not isinstance(source.state, block.Document):
            return None
        return source.expect_re(FRONT_MATTER_PATTERN)

    @classmethod
    def parse(cls, source: Source) -> Match[str] | None:
        m = source.match
        source.consume()
        return m
