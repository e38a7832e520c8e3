"""Block elements that start a new section."""

from marko import block

HEADING_TYPES = (block.Heading, block.SetextHeading)
