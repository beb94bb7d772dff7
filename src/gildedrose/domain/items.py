"""Inventory item record.

Items are plain mutable records owned by the caller.  Rules never
subclass or wrap them: behavior is looked up by ``name`` in the rule
tables of :mod:`gildedrose.domain.rules`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(slots=True)
class Item:
    """A single shop item.

    Attributes:
        name: Rule lookup key. Treated as fixed once the item exists.
        sell_in: Days remaining until the sell date; goes negative once passed.
        quality: Desirability score, kept within ``[0, 50]`` for all
            non-legendary items.
    """

    name: str
    sell_in: int
    quality: int

    def __repr__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"


@dataclass(frozen=True, slots=True)
class ItemRule:
    """A named, callable update applied to one item for one simulated day.

    Quality rules touch only ``quality``; sell-in rules touch only
    ``sell_in``.  ``description`` is a short human-readable label
    such as ``"standard(-1, -2)"``.
    """

    apply: Callable[[Item], None]
    description: str

    def __call__(self, item: Item) -> None:
        self.apply(item)
