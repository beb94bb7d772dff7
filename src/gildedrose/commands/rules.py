"""Command: show which rules an item name resolves to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gildedrose.commands._base import RoseCommand

if TYPE_CHECKING:
    from gildedrose.commands._context import AppContext


@click.command(
    cls=RoseCommand,
    examples="""\
  gildedrose rules "Aged Brie"
  gildedrose --json rules "Conjured Mana Cake"
  gildedrose -v rules "Sulfuras, Hand of Ragnaros" Elixir""",
)
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def rules(app: AppContext, names: tuple[str, ...]) -> None:
    """Show the quality and sell-in rules for each NAME."""
    from gildedrose.services.inventory import InventoryService

    app.emit(InventoryService.describe_rules(names))
