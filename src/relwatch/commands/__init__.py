"""Subcommand modules for relwatch.

Provides register_commands() which uses deferred imports to keep
``relwatch --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from relwatch.commands.check import check
    from relwatch.commands.resolve import resolve

    cli.add_command(resolve)
    cli.add_command(check)
