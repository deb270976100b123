"""Subcommand modules for cusiptool.

Provides register_commands() which uses deferred imports to keep
``cusiptool --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from cusiptool.commands.check import check
    from cusiptool.commands.identify import check_digit, parse_cmd, repair_cmd

    cli.add_command(check)
    cli.add_command(parse_cmd)
    cli.add_command(repair_cmd)
    cli.add_command(check_digit)
