"""Parse diagnostics and their location-qualified rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class DiagnosticKind(Enum):
    """Category of a parse problem."""

    MALFORMED_MARKER_TAG = "malformed_marker_tag"
    DUPLICATE_TAG = "duplicate_tag"
    UNMATCHED_END = "unmatched_end"
    MISSING_START = "missing_start"
    MISSING_END = "missing_end"
    EMPTY_BLOCK = "empty_block"
    MISSING_DIRECTORY = "missing_directory"


MESSAGE_TEMPLATES: dict[DiagnosticKind, str] = {
    DiagnosticKind.MALFORMED_MARKER_TAG: "The tag name is empty in {0} declaration.",
    DiagnosticKind.DUPLICATE_TAG: "Duplicate tag '{0}' found. Each tag must be unique.",
    DiagnosticKind.UNMATCHED_END: "End tag '{0}' found without corresponding start tag.",
    DiagnosticKind.MISSING_START: "Start tag '{0}' is missing.",
    DiagnosticKind.MISSING_END: "End tag '{0}' is missing.",
    DiagnosticKind.EMPTY_BLOCK: "SQL block '{0}' is empty.",
    DiagnosticKind.MISSING_DIRECTORY: "No such directory exists.",
}


def format_message(
    template: str,
    actual_value: Any = None,
    source: str | None = None,
    line: int | None = None,
    column: int | None = None,
) -> str:
    """Render a message template with whatever location is known.

    The most specific location wins: source, line and column together,
    then line and column, then source and line, then line, then source.
    A column is only shown alongside a line.

    Args:
        template: Message text, ``{0}`` is replaced by ``actual_value``.
        actual_value: Value substituted into the template.
        source: Name of the source the problem was found in.
        line: 1-based line number.
        column: 1-based column number.

    Returns:
        The rendered diagnostic text.
    """
    message = template.format(actual_value) if actual_value is not None else template

    if source is not None and line is not None and column is not None:
        return f"{source}:(line {line}, col {column}): error: {message}"
    if line is not None and column is not None:
        return f"Parsing error (line {line}, col {column}): error: {message}"
    if source is not None and line is not None:
        return f"{source}:(line {line}): error: {message}"
    if line is not None:
        return f"Parsing error (line {line}): error: {message}"
    if source is not None:
        return f"{source}: error: {message}"
    return f"Parsing error: {message}"


@dataclass(frozen=True)
class Diagnostic:
    """A single located parse problem.

    Diagnostics are plain data; only the parser facade decides whether
    a set of them fails a run.
    """

    kind: DiagnosticKind
    message: str
    source: str | None = None
    line: int | None = None
    column: int | None = None
    tag: str | None = None

    @classmethod
    def create(
        cls,
        kind: DiagnosticKind,
        value: Any = None,
        source: str | None = None,
        line: int | None = None,
        column: int | None = None,
        tag: str | None = None,
    ) -> Diagnostic:
        """Build a diagnostic from its kind's message template."""
        template = MESSAGE_TEMPLATES[kind]
        message = template.format(value) if value is not None else template
        return cls(kind=kind, message=message, source=source, line=line, column=column, tag=tag)

    def render(self) -> str:
        """Render with the location prefix."""
        return format_message(self.message, source=self.source, line=self.line, column=self.column)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "source": self.source,
            "line": self.line,
            "column": self.column,
            "tag": self.tag,
            "text": self.render(),
        }

    def __str__(self) -> str:
        return self.render()


def render_report(diagnostics: Iterable[Diagnostic]) -> str:
    """Join rendered diagnostics, one per line."""
    return "\n".join(d.render() for d in diagnostics)
