"""List command for displaying parsed tags."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sqlblocks.cli.commands.common import require_registry, run_parse

console = Console()


@click.command("list")
@click.argument("paths", nargs=-1)
@click.option("--project-dir", default=".", help="Project root directory")
def list_tags(paths: tuple[str, ...], project_dir: str) -> None:
    """List tags of all parsed SQL statements."""
    registry = require_registry(run_parse(paths, project_dir))

    if not registry:
        console.print("[yellow]No SQL blocks found[/yellow]")
        return

    table = Table(show_header=True, title="SQL Blocks")
    table.add_column("Tag", style="cyan")
    table.add_column("Lines")
    table.add_column("First Line")

    for statement in sorted(registry, key=lambda s: s.name.casefold()):
        lines = statement.body.splitlines()
        table.add_row(escape(statement.name), str(len(lines)), escape(lines[0]))

    console.print(table)
