"""Parse tagged SQL blocks into a case-insensitive statement registry."""

from sqlblocks.config import ParserConfig, load_config
from sqlblocks.parsing import (
    Diagnostic,
    DiagnosticKind,
    ParseError,
    ParseResult,
    ParsedStatement,
    Source,
    SqlParser,
    StatementNotFoundError,
    StatementRegistry,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "ParseError",
    "ParseResult",
    "ParsedStatement",
    "ParserConfig",
    "Source",
    "SqlParser",
    "StatementNotFoundError",
    "StatementRegistry",
    "load_config",
    "parse",
]
