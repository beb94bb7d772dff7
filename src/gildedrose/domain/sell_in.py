"""Sell-in rule family: how the countdown to the sell date moves per day."""

from __future__ import annotations

from gildedrose.domain.items import Item, ItemRule


def linear_change(rate: int) -> ItemRule:
    """Add *rate* (usually ``-1``) to ``sell_in`` each day."""

    def apply(item: Item) -> None:
        item.sell_in += rate

    return ItemRule(apply, f"linear_change({rate:+d})")


def no_change() -> ItemRule:
    """Leave ``sell_in`` untouched."""

    def apply(item: Item) -> None:
        pass

    return ItemRule(apply, "no_change")
