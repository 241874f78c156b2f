"""Tagged SQL block parsing."""

from sqlblocks.parsing.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    format_message,
    render_report,
)
from sqlblocks.parsing.errors import ParseError, SourceDecodeError, StatementNotFoundError
from sqlblocks.parsing.parser import ParseResult, SqlParser, parse
from sqlblocks.parsing.registry import StatementRegistry
from sqlblocks.parsing.schemas import (
    BlockMarker,
    BlockState,
    Line,
    MarkerKind,
    ParsedStatement,
    Source,
)

__all__ = [
    "BlockMarker",
    "BlockState",
    "Diagnostic",
    "DiagnosticKind",
    "Line",
    "MarkerKind",
    "ParseError",
    "ParseResult",
    "ParsedStatement",
    "Source",
    "SourceDecodeError",
    "SqlParser",
    "StatementNotFoundError",
    "StatementRegistry",
    "format_message",
    "parse",
    "render_report",
]
