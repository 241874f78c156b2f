"""Exceptions raised at the parser's public boundary."""

from __future__ import annotations

from typing import Sequence

from sqlblocks.parsing.diagnostics import Diagnostic, render_report


class ParseError(ValueError):
    """A parse run produced one or more diagnostics.

    The message lists every diagnostic, one per line.
    """

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        self.diagnostics = list(diagnostics)
        super().__init__(render_report(self.diagnostics))


class StatementNotFoundError(KeyError):
    """No statement is registered under the requested tag."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"The given tag '{self.name}' is not present in the collection."


class SourceDecodeError(ValueError):
    """A SQL file could not be decoded with the configured encoding."""

    def __init__(self, path: str, encoding: str, reason: str) -> None:
        self.path = path
        self.encoding = encoding
        super().__init__(f"Could not decode {path} as {encoding}: {reason}")
