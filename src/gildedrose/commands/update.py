"""Command: advance the inventory by one day."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gildedrose.commands._base import RoseCommand

if TYPE_CHECKING:
    from gildedrose.commands._context import AppContext


@click.command(
    cls=RoseCommand,
    examples="""\
  gildedrose update
  gildedrose --json update
  gildedrose update --item "Aged Brie" 2 0
  gildedrose update --item "Aged Brie" 2 0 --item "Conjured Mana Cake" 3 6""",
)
@click.option(
    "--item",
    "items",
    type=(str, int, int),
    multiple=True,
    metavar="NAME SELL_IN QUALITY",
    help="Update this item instead of the sample inventory (repeatable).",
)
@click.pass_obj
def update(app: AppContext, items: tuple[tuple[str, int, int], ...]) -> None:
    """Apply one day's update and show the resulting inventory."""
    from gildedrose.domain.items import Item
    from gildedrose.domain.samples import sample_inventory
    from gildedrose.services.inventory import InventoryService

    inventory = [Item(*fields) for fields in items] if items else sample_inventory()
    app.emit(InventoryService(inventory).update())
