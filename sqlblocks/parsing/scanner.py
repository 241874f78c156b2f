"""Line splitting and block marker classification."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from sqlblocks.parsing.diagnostics import Diagnostic, DiagnosticKind
from sqlblocks.parsing.schemas import BlockMarker, Line, MarkerKind, Source

logger = logging.getLogger(__name__)

NEWLINE_RE = re.compile(r"\r\n|\n|\r")

MARKER_PATTERNS: dict[MarkerKind, re.Pattern[str]] = {
    MarkerKind.START: re.compile(r"^\s*--\s*#start#", re.IGNORECASE),
    MarkerKind.END: re.compile(r"^\s*--\s*#end#", re.IGNORECASE),
}


@dataclass
class ScannedSource:
    """Lines and marker events produced by scanning one source."""

    source: Source
    lines: list[Line] = field(default_factory=list)
    markers: list[BlockMarker] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def name(self) -> str | None:
        """Name of the scanned source."""
        return self.source.name

    def body_between(self, start_line: int, end_line: int) -> str:
        """Join the lines strictly between two line numbers.

        Each line is trimmed and blank lines are dropped before joining.
        """
        texts = (line.text.strip() for line in self.lines[start_line:end_line - 1])
        return "\n".join(text for text in texts if text).strip()


def split_lines(content: str) -> list[Line]:
    """Split text on any newline convention into numbered lines."""
    return [Line(number=i, text=text) for i, text in enumerate(NEWLINE_RE.split(content), start=1)]


def classify(line: Line, source: str | None = None) -> tuple[BlockMarker | None, Diagnostic | None]:
    """Classify a line as a start marker, an end marker, or content.

    Args:
        line: The line to classify.
        source: Source name used when a diagnostic is raised.

    Returns:
        Tuple of the marker (None for content lines) and a diagnostic
        when a marker line carries no tag name.
    """
    for kind, pattern in MARKER_PATTERNS.items():
        match = pattern.match(line.text)
        if not match:
            continue

        column = match.end() + 1
        tag = line.text[match.end():].strip()
        if not tag:
            return None, Diagnostic.create(
                DiagnosticKind.MALFORMED_MARKER_TAG,
                kind.prefix,
                source=source,
                line=line.number,
                column=column,
            )
        return BlockMarker(kind=kind, tag=tag, line=line.number, column=column), None

    return None, None


def scan(source: Source) -> ScannedSource:
    """Scan a source into lines, marker events and marker diagnostics.

    Scanning does not touch any shared state, so independent sources
    can be scanned concurrently.
    """
    scanned = ScannedSource(source=source)
    if not source.content.strip():
        logger.debug("Skipping empty source %s", source.name)
        return scanned

    scanned.lines = split_lines(source.content)
    for line in scanned.lines:
        if line.is_blank:
            continue
        marker, diagnostic = classify(line, source.name)
        if diagnostic is not None:
            scanned.diagnostics.append(diagnostic)
        elif marker is not None:
            scanned.markers.append(marker)

    logger.debug(
        "Scanned %s: %d lines, %d markers",
        source.name or "<string>",
        len(scanned.lines),
        len(scanned.markers),
    )
    return scanned
