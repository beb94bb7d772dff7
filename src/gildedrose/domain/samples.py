"""The shop's starting inventory, used by ``gildedrose update`` by default."""

from __future__ import annotations

from gildedrose.domain.items import Item
from gildedrose.domain.rules import SpecialItem

# (name, sell_in, quality)
SAMPLE_ITEMS: tuple[tuple[str, int, int], ...] = (
    ("+5 Dexterity Vest", 10, 20),
    (SpecialItem.AGED_BRIE, 2, 0),
    ("Elixir of the Mongoose", 5, 7),
    (SpecialItem.SULFURAS, 0, 80),
    (SpecialItem.BACKSTAGE_PASS, 15, 20),
    (SpecialItem.CONJURED, 3, 6),
)


def sample_inventory() -> list[Item]:
    """Return fresh copies of the sample items."""
    return [Item(str(name), sell_in, quality) for name, sell_in, quality in SAMPLE_ITEMS]
