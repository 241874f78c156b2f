"""Block lifecycle tracking across the sources of one parse run."""

from __future__ import annotations

import heapq
import logging

from sqlblocks.parsing.diagnostics import Diagnostic, DiagnosticKind
from sqlblocks.parsing.scanner import ScannedSource
from sqlblocks.parsing.schemas import BlockMarker, BlockState, MarkerKind, ParsedStatement

logger = logging.getLogger(__name__)


def normalize_tag(tag: str) -> str:
    """Key used to compare tag names case-insensitively."""
    return tag.casefold()


class BlockTracker:
    """State machine that pairs start and end markers by tag.

    One tracker is owned by a single parse run and fed every scanned
    source in order. Tags form one flat, case-insensitive namespace for
    the whole run, so a tag opened in an earlier source makes a later
    start of the same tag a duplicate. End markers only close blocks
    opened in the source being tracked; an end marker for a tag already
    opened elsewhere in the run is left to the duplicate diagnostic.

    The tracker is not thread-safe; feed it from one thread.
    """

    def __init__(self) -> None:
        """Initialize empty tracking state."""
        self._states: dict[str, BlockState] = {}
        self._current: dict[str, BlockState] = {}
        self.diagnostics: list[Diagnostic] = []
        self.statements: list[ParsedStatement] = []

    @property
    def tags(self) -> list[str]:
        """Tags seen so far, in their opening casing."""
        return [state.tag for state in self._states.values()]

    def track(self, scanned: ScannedSource) -> None:
        """Apply one scanned source's markers, then close out its blocks.

        Diagnostics are appended in line order; the missing-marker and
        empty-block checks for the source follow its last line.
        """
        self._current = {}

        for item in heapq.merge(scanned.markers, scanned.diagnostics, key=lambda i: i.line or 0):
            if isinstance(item, Diagnostic):
                self.diagnostics.append(item)
            elif item.kind is MarkerKind.START:
                self._on_start(item, scanned.name)
            else:
                self._on_end(item, scanned.name)

        opened = list(self._current.values())
        self._check_missing(opened)
        self._extract(opened, scanned)

    def _on_start(self, marker: BlockMarker, source: str | None) -> None:
        key = normalize_tag(marker.tag)
        if key in self._states:
            self.diagnostics.append(Diagnostic.create(
                DiagnosticKind.DUPLICATE_TAG,
                marker.tag,
                source=source,
                line=marker.line,
                column=marker.column,
                tag=marker.tag,
            ))
            return

        state = BlockState(tag=marker.tag, source=source, start_line=marker.line, start_found=True)
        self._states[key] = state
        self._current[key] = state

    def _on_end(self, marker: BlockMarker, source: str | None) -> None:
        key = normalize_tag(marker.tag)
        state = self._current.get(key)
        if state is not None and state.start_found:
            state.end_line = marker.line
            state.end_found = True
            return
        if key in self._states:
            # closes a duplicate start, already reported
            return

        self.diagnostics.append(Diagnostic.create(
            DiagnosticKind.UNMATCHED_END,
            marker.tag,
            source=source,
            line=marker.line,
            column=marker.column,
            tag=marker.tag,
        ))

    def _check_missing(self, opened: list[BlockState]) -> None:
        for state in opened:
            if not state.start_found:
                self.diagnostics.append(Diagnostic.create(
                    DiagnosticKind.MISSING_START,
                    state.tag,
                    source=state.source,
                    tag=state.tag,
                ))
            if not state.end_found:
                self.diagnostics.append(Diagnostic.create(
                    DiagnosticKind.MISSING_END,
                    state.tag,
                    source=state.source,
                    line=state.start_line,
                    tag=state.tag,
                ))

    def _extract(self, opened: list[BlockState], scanned: ScannedSource) -> None:
        for state in opened:
            if not state.is_complete:
                continue

            body = scanned.body_between(state.start_line, state.end_line)
            if not body:
                self.diagnostics.append(Diagnostic.create(
                    DiagnosticKind.EMPTY_BLOCK,
                    state.tag,
                    source=state.source,
                    line=state.start_line,
                    tag=state.tag,
                ))
                continue

            self.statements.append(ParsedStatement(name=state.tag, body=body))
            logger.debug("Extracted block %s from %s", state.tag, scanned.name or "<string>")
