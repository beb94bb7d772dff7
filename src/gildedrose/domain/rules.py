"""Per-name rule tables and resolvers.

Items are never subclassed.  Instead two independent read-only tables map
an item name to its quality rule and its sell-in rule.  Names missing
from a table fall back to that table's default rule; an unknown name is
the normal path for ordinary goods, not an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from gildedrose.domain.items import ItemRule
from gildedrose.domain.quality import backstage_pass, legendary, standard
from gildedrose.domain.sell_in import linear_change, no_change


class SpecialItem(StrEnum):
    """Item names with behavior of their own."""

    AGED_BRIE = "Aged Brie"
    SULFURAS = "Sulfuras, Hand of Ragnaros"
    BACKSTAGE_PASS = "Backstage passes to a TAFKAL80ETC concert"
    CONJURED = "Conjured Mana Cake"


# --- Quality ---

QUALITY_RULES: Mapping[str, ItemRule] = MappingProxyType(
    {
        SpecialItem.AGED_BRIE: standard(1, 2),
        SpecialItem.SULFURAS: legendary(),
        SpecialItem.BACKSTAGE_PASS: backstage_pass(),
        SpecialItem.CONJURED: standard(-2, -4),
    }
)

DEFAULT_QUALITY_RULE: ItemRule = standard(-1, -2)

# --- Sell-in ---

SELL_IN_RULES: Mapping[str, ItemRule] = MappingProxyType(
    {
        SpecialItem.SULFURAS: no_change(),
    }
)

DEFAULT_SELL_IN_RULE: ItemRule = linear_change(-1)


def get_quality_rule(name: str) -> ItemRule:
    """Return the quality rule for *name*, or the default rule."""
    return QUALITY_RULES.get(name, DEFAULT_QUALITY_RULE)


def get_sell_in_rule(name: str) -> ItemRule:
    """Return the sell-in rule for *name*, or the default rule."""
    return SELL_IN_RULES.get(name, DEFAULT_SELL_IN_RULE)


def is_special(name: str) -> bool:
    """Check whether *name* has an entry in either rule table."""
    return name in QUALITY_RULES or name in SELL_IN_RULES
