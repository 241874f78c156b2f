"""Helpers shared by commands that parse SQL files."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from sqlblocks.config import load_config
from sqlblocks.parsing.errors import SourceDecodeError
from sqlblocks.parsing.loader import load_paths
from sqlblocks.parsing.parser import ParseResult, SqlParser
from sqlblocks.parsing.registry import StatementRegistry

console = Console()


def run_parse(paths: tuple[str, ...], project_dir: str) -> ParseResult:
    """Parse the given files and directories, or the configured sql_dir.

    Exits with status 1 if a given path does not exist or a file does
    not decode with the configured encoding.
    """
    project_path = Path(project_dir)
    config = load_config(project_path)
    parser = SqlParser(config, base_dir=project_path)

    try:
        if not paths:
            return parser.parse_directory_result()
        sources = load_paths(
            list(paths),
            pattern=config.pattern,
            recursive=config.recursive,
            encoding=config.encoding,
        )
    except (FileNotFoundError, SourceDecodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    return parser.parse(sources)


def require_registry(result: ParseResult) -> StatementRegistry:
    """Return the registry, or print the diagnostics and exit with status 1."""
    if result.registry is None or not result.ok:
        console.print(f"[red]Parsing failed with {len(result.diagnostics)} error(s):[/red]")
        click.echo(result.report)
        raise SystemExit(1)
    return result.registry
