"""Check command for validating SQL block files."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sqlblocks.cli.commands.common import run_parse

console = Console()


@click.command("check")
@click.argument("paths", nargs=-1)
@click.option("--project-dir", default=".", help="Project root directory")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def check_command(paths: tuple[str, ...], project_dir: str, output_json: bool) -> None:
    """Validate SQL files and report every problem found.

    PATHS are SQL files or directories; the configured sql_dir is used
    when none are given.

    Examples:

        sqlblocks check

        sqlblocks check queries/ extra.sql --json
    """
    result = run_parse(paths, project_dir)

    if output_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            raise SystemExit(1)
        return

    if result.ok:
        count = len(result.registry) if result.registry is not None else 0
        console.print(
            f"[green]OK:[/green] {count} statement(s) from {result.source_count} source(s)"
        )
        return

    table = Table(show_header=True, title="Parse Errors")
    table.add_column("Source")
    table.add_column("Line")
    table.add_column("Col")
    table.add_column("Kind", style="cyan")
    table.add_column("Message")

    for diagnostic in result.diagnostics:
        table.add_row(
            escape(diagnostic.source or "-"),
            str(diagnostic.line or "-"),
            str(diagnostic.column or "-"),
            diagnostic.kind.value,
            escape(diagnostic.message),
        )

    console.print(table)
    console.print(f"\n[red]Errors: {len(result.diagnostics)}[/red]")
    raise SystemExit(1)
