"""Init command for creating a project config."""

from pathlib import Path

import click
from rich.console import Console

from sqlblocks.config import ParserConfig, config_path, save_config

console = Console()


@click.command()
@click.option("--project-dir", default=".", help="Project root directory")
@click.option("--sql-dir", default=None, help="Directory holding SQL files")
@click.option("--force", is_flag=True, help="Overwrite an existing config")
def init(project_dir: str, sql_dir: str, force: bool) -> None:
    """Create .sqlblocks/config.yaml with default settings."""
    project_path = Path(project_dir)
    path = config_path(project_path)

    if path.exists() and not force:
        console.print(f"[red]Error:[/red] Config already exists at {path} (use --force)")
        raise SystemExit(1)

    config = ParserConfig(sql_dir=sql_dir) if sql_dir else ParserConfig()
    written = save_config(config, project_path)
    (project_path / config.sql_dir).mkdir(parents=True, exist_ok=True)
    console.print(f"[green]Created config:[/green] {written}")
