"""Show command for printing one SQL statement."""

import click
from rich.console import Console
from rich.markup import escape

from sqlblocks.cli.commands.common import require_registry, run_parse

console = Console()


@click.command()
@click.argument("tag")
@click.argument("paths", nargs=-1)
@click.option("--project-dir", default=".", help="Project root directory")
def show(tag: str, paths: tuple[str, ...], project_dir: str) -> None:
    """Print the SQL body stored under TAG.

    Tag lookup ignores case.
    """
    registry = require_registry(run_parse(paths, project_dir))

    body = registry.try_get(tag)
    if body is None:
        console.print(f"[red]Error:[/red] Tag '{escape(tag)}' not found")
        raise SystemExit(1)

    click.echo(body)
