"""Reflink output schemas."""

from pydantic import BaseModel, Field


class ReflinkOutput(BaseModel):
    """Output of ``cmd_reflink``."""

    errors: list[str] = Field(default_factory=list, description="Rejected options, empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems, such as nothing to write")
    path: str = Field(..., description="Source file path, empty string for standard input")
    markdown: str = Field(..., description="Rewritten Markdown text")
    changed: bool = Field(..., description="Whether the rewritten text differs from the input")
    written: bool = Field(..., description="Whether the file was overwritten in place")
    links_converted: int = Field(..., description="Inline links turned into shortcut references")
    conflicts_found: int = Field(..., description="Link texts used with more than one URL")
    definitions_added: int = Field(..., description="Definitions emitted into the output")
