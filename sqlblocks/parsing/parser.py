"""Parser facade: turns named SQL sources into a statement registry."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from sqlblocks.config import ParserConfig
from sqlblocks.parsing.diagnostics import Diagnostic, DiagnosticKind, render_report
from sqlblocks.parsing.errors import ParseError
from sqlblocks.parsing.loader import load_sources
from sqlblocks.parsing.registry import StatementRegistry
from sqlblocks.parsing.scanner import ScannedSource, scan
from sqlblocks.parsing.schemas import Source
from sqlblocks.parsing.tracker import BlockTracker

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of a parse run: a registry or the diagnostics, never both."""

    registry: StatementRegistry | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    source_count: int = 0

    @property
    def ok(self) -> bool:
        """Check if the run produced no diagnostics."""
        return not self.diagnostics

    @property
    def report(self) -> str:
        """All diagnostics rendered, one per line."""
        return render_report(self.diagnostics)

    def unwrap(self) -> StatementRegistry:
        """Return the registry or raise the aggregated failure.

        Raises:
            ParseError: If any diagnostic was raised.
        """
        if self.diagnostics or self.registry is None:
            raise ParseError(self.diagnostics)
        return self.registry

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ok": self.ok,
            "source_count": self.source_count,
            "statement_count": len(self.registry) if self.registry is not None else 0,
            "statements": [s.to_dict() for s in self.registry] if self.registry is not None else [],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


class SqlParser:
    """Parse tagged SQL blocks from strings, files or directories.

    Every source of one call shares a single BlockTracker, so tags are
    unique across all of them. The registry is only built when no
    source produced a diagnostic.
    """

    def __init__(self, config: ParserConfig | None = None, base_dir: Path | str = ".") -> None:
        """Initialize parser.

        Args:
            config: Parser settings, defaults when omitted.
            base_dir: Directory that relative SQL directories resolve against.
        """
        self.config = config or ParserConfig()
        self.base_dir = Path(base_dir)

    def parse(self, sources: Iterable[Source]) -> ParseResult:
        """Parse sources in order without raising on bad input.

        Args:
            sources: Named SQL sources.

        Returns:
            ParseResult holding the registry or every diagnostic found.
        """
        return self._run(list(sources))

    def parse_or_raise(self, sources: Iterable[Source]) -> StatementRegistry:
        """Parse sources and return the registry.

        Raises:
            ParseError: If any source produced a diagnostic.
        """
        return self.parse(sources).unwrap()

    def parse_string(self, content: str, name: str | None = None) -> StatementRegistry:
        """Parse a single inline SQL string.

        Raises:
            ParseError: If the string produced a diagnostic.
        """
        return self.parse_or_raise([Source(content=content, name=name)])

    def parse_directory(self, directory: Path | str | None = None) -> StatementRegistry:
        """Parse every SQL file under a directory.

        Args:
            directory: Directory to read; the configured sql_dir when omitted.
                Relative paths resolve against base_dir.

        Raises:
            ValueError: If the directory name is blank.
            ParseError: If the directory is missing or any file is invalid.
        """
        return self.parse_directory_result(directory).unwrap()

    def parse_directory_result(self, directory: Path | str | None = None) -> ParseResult:
        """Parse every SQL file under a directory without raising on bad input.

        A missing directory is reported as a diagnostic.

        Raises:
            ValueError: If the directory name is blank.
            SourceDecodeError: If a file does not decode with the configured encoding.
        """
        name = str(directory) if directory is not None else self.config.sql_dir
        if not name.strip():
            raise ValueError("Directory name must not be blank")

        path = Path(name)
        if not path.is_absolute():
            path = self.base_dir / path

        if not path.is_dir():
            logger.debug("SQL directory %s does not exist", path)
            return ParseResult(diagnostics=[
                Diagnostic.create(DiagnosticKind.MISSING_DIRECTORY, source=name),
            ])

        sources = load_sources(
            path,
            pattern=self.config.pattern,
            recursive=self.config.recursive,
            encoding=self.config.encoding,
        )
        return self.parse(sources)

    def _run(self, sources: list[Source]) -> ParseResult:
        tracker = BlockTracker()
        for scanned in self._scan_all(sources):
            tracker.track(scanned)

        if tracker.diagnostics:
            logger.debug("Parse failed with %d diagnostic(s)", len(tracker.diagnostics))
            return ParseResult(diagnostics=tracker.diagnostics, source_count=len(sources))

        registry = StatementRegistry(tracker.statements)
        logger.debug("Parsed %d statement(s) from %d source(s)", len(registry), len(sources))
        return ParseResult(registry=registry, source_count=len(sources))

    def _scan_all(self, sources: list[Source]) -> list[ScannedSource]:
        """Scan sources, in a thread pool when configured.

        Results keep input order so tracking stays deterministic.
        """
        if self.config.workers > 1 and len(sources) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                return list(executor.map(scan, sources))
        return [scan(source) for source in sources]


def parse(sources: Iterable[Source], config: ParserConfig | None = None) -> StatementRegistry:
    """Parse sources into a registry.

    Raises:
        ParseError: If any source produced a diagnostic.
    """
    return SqlParser(config).parse_or_raise(sources)
