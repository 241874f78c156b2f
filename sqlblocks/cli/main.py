"""Main CLI entry point for sqlblocks."""

import logging

import click
from rich.logging import RichHandler

from sqlblocks import __version__
from sqlblocks.cli.commands.check import check_command
from sqlblocks.cli.commands.export import export_command
from sqlblocks.cli.commands.init import init
from sqlblocks.cli.commands.list_tags import list_tags
from sqlblocks.cli.commands.show import show


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def cli(verbose: bool) -> None:
    """sqlblocks - tagged SQL block parser.

    Reads SQL files whose statements are wrapped in
    "-- #start# <tag>" / "-- #end# <tag>" markers and checks or
    extracts them by tag.

    \b
    COMMANDS:
      sqlblocks init                     Write a default .sqlblocks/config.yaml
      sqlblocks check [PATHS...]         Validate SQL files
      sqlblocks list [PATHS...]          List parsed tags
      sqlblocks show TAG [PATHS...]      Print one statement
      sqlblocks export [PATHS...]        Re-emit all statements
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


cli.add_command(init)
cli.add_command(check_command, name="check")
cli.add_command(list_tags, name="list")
cli.add_command(show)
cli.add_command(export_command, name="export")


if __name__ == "__main__":
    cli()
