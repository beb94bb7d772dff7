"""Tests for the sample inventory."""

from gildedrose.domain.items import Item
from gildedrose.domain.samples import sample_inventory


class TestSampleInventory:
    def test_contents(self) -> None:
        assert sample_inventory() == [
            Item("+5 Dexterity Vest", 10, 20),
            Item("Aged Brie", 2, 0),
            Item("Elixir of the Mongoose", 5, 7),
            Item("Sulfuras, Hand of Ragnaros", 0, 80),
            Item("Backstage passes to a TAFKAL80ETC concert", 15, 20),
            Item("Conjured Mana Cake", 3, 6),
        ]

    def test_names_are_plain_strings(self) -> None:
        assert all(type(item.name) is str for item in sample_inventory())

    def test_fresh_copies(self) -> None:
        first = sample_inventory()
        first[0].quality = 0
        assert sample_inventory()[0].quality == 20
