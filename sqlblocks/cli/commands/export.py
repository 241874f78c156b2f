"""Export command for re-emitting parsed statements."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from sqlblocks.cli.commands.common import require_registry, run_parse

console = Console()


@click.command("export")
@click.argument("paths", nargs=-1)
@click.option("--project-dir", default=".", help="Project root directory")
@click.option("--output", "-o", default=None, help="Write to a file instead of stdout")
def export_command(paths: tuple[str, ...], project_dir: str, output: str | None) -> None:
    """Write every statement back out in block marker format.

    Blank lines and indentation are normalized; statements are sorted
    by tag.
    """
    registry = require_registry(run_parse(paths, project_dir))
    statements = sorted(registry, key=lambda s: s.name.casefold())
    content = "\n".join(statement.render() for statement in statements)

    if output:
        Path(output).write_text(content)
        console.print(f"[green]Exported {len(statements)} statement(s) to:[/green] {output}")
    else:
        click.echo(content, nl=False)
