"""Core data structures for tagged SQL block parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

START_PREFIX = "#start#"
END_PREFIX = "#end#"


class MarkerKind(Enum):
    """Kind of block marker found on a line."""

    START = "start"
    END = "end"

    @property
    def prefix(self) -> str:
        """Marker token as written in source files."""
        return START_PREFIX if self is MarkerKind.START else END_PREFIX


@dataclass(frozen=True)
class Source:
    """A named unit of SQL text to parse.

    The name is only used to attribute diagnostics; inline strings
    have no name.
    """

    content: str
    name: str | None = None

    def __post_init__(self) -> None:
        """Reject missing content early."""
        if self.content is None:
            raise TypeError("Source content must not be None")


@dataclass(frozen=True)
class Line:
    """A single 1-based numbered line of a source."""

    number: int
    text: str

    @property
    def is_blank(self) -> bool:
        """Check if the line holds only whitespace."""
        return not self.text.strip()


@dataclass(frozen=True)
class BlockMarker:
    """A start or end marker recognized on a line."""

    kind: MarkerKind
    tag: str
    line: int
    column: int  # 1-based, right after the marker token


@dataclass
class BlockState:
    """Lifecycle of one tagged block during a parse run."""

    tag: str  # casing of the occurrence that opened the block
    source: str | None = None
    start_line: int = 0
    end_line: int = 0
    start_found: bool = False
    end_found: bool = False

    @property
    def is_complete(self) -> bool:
        """Check if both markers were seen."""
        return self.start_found and self.end_found


@dataclass(frozen=True)
class ParsedStatement:
    """A successfully extracted SQL block."""

    name: str
    body: str

    def render(self) -> str:
        """Re-emit the statement in block marker format."""
        return f"-- {START_PREFIX} {self.name}\n{self.body}\n-- {END_PREFIX} {self.name}\n"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "body": self.body}

    def __str__(self) -> str:
        return self.render()

