"""
Tree models — rendered lines of a directory snapshot.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Connector(str, Enum):
    """Glyph placed before an entry name."""

    BRANCH = "├── "
    LAST = "└── "


# Prefix segments handed down to the children of an entry
CONTINUATION = "│   "
BLANK = "    "


class TreeLine(BaseModel):
    """One entry of the rendered tree."""

    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    connector: Connector
    name: str
    annotation: str = ""

    def render(self) -> str:
        comment = f"  # {self.annotation}" if self.annotation else ""
        return f"{self.prefix}{self.connector.value}{self.name}{comment}"


class SkippedEntry(BaseModel):
    """An entry that could not be stat-ed or listed during a walk."""

    path: str
    reason: str


class RenderResult(BaseModel):
    """Output of a tree render: the lines plus anything skipped on the way."""

    root_name: str
    lines: list[TreeLine] = Field(default_factory=list)
    skipped: list[SkippedEntry] = Field(default_factory=list)

    def text_lines(self) -> list[str]:
        return [line.render() for line in self.lines]

    def to_text(self) -> str:
        """Root header followed by one line per entry."""
        return "\n".join([f"{self.root_name}/", *self.text_lines()])

    def to_markdown(self) -> str:
        """The tree wrapped in a fenced code block."""
        return "```\n" + self.to_text() + "\n```"

    def to_dict(self) -> dict:
        return {
            "root": self.root_name,
            "lines": self.text_lines(),
            "skipped": [s.model_dump() for s in self.skipped],
        }
