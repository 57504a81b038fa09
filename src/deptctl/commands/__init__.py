"""Subcommand modules for deptctl.

Provides register_commands() which uses deferred imports to keep
``deptctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from deptctl.commands.run import run
    from deptctl.commands.search import search
    from deptctl.commands.shell import shell

    cli.add_command(shell)
    cli.add_command(run)
    cli.add_command(search)
