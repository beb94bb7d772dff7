"""Subcommand modules for gildedrose.

Provides register_commands() which uses deferred imports to keep
``gildedrose --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gildedrose.commands.rules import rules
    from gildedrose.commands.update import update

    cli.add_command(update)
    cli.add_command(rules)
