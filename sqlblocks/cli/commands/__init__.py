"""CLI commands for sqlblocks."""

from sqlblocks.cli.commands.check import check_command
from sqlblocks.cli.commands.export import export_command
from sqlblocks.cli.commands.init import init
from sqlblocks.cli.commands.list_tags import list_tags
from sqlblocks.cli.commands.show import show

__all__ = [
    "check_command",
    "export_command",
    "init",
    "list_tags",
    "show",
]
