"""Quality rule family.

Each constructor returns an :class:`~gildedrose.domain.items.ItemRule`
that changes ``quality`` for one simulated day, reading the item's
current (pre-update) ``sell_in``.  Every rule is wrapped in a bound:
legendary rules get the lower bound only so their fixed value may sit
above :data:`MAX_QUALITY`.
"""

from __future__ import annotations

from gildedrose.domain.items import Item, ItemRule

MIN_QUALITY = 0
MAX_QUALITY = 50

BACKSTAGE_CLOSE_DAYS = 5  # +3 per day at or inside this many days
BACKSTAGE_NEAR_DAYS = 10  # +2 per day at or inside this many days


def _signed(n: int) -> str:
    return f"{n:+d}"


def bound_quality_low(rule: ItemRule) -> ItemRule:
    """Wrap *rule* so that quality never drops below :data:`MIN_QUALITY`."""

    def apply(item: Item) -> None:
        rule(item)
        if item.quality < MIN_QUALITY:
            item.quality = MIN_QUALITY

    return ItemRule(apply, rule.description)


def bound_quality_high_low(rule: ItemRule) -> ItemRule:
    """Wrap *rule* so that quality stays within ``[MIN_QUALITY, MAX_QUALITY]``."""

    def apply(item: Item) -> None:
        rule(item)
        if item.quality > MAX_QUALITY:
            item.quality = MAX_QUALITY

    return bound_quality_low(ItemRule(apply, rule.description))


def standard(rate: int, past_rate: int) -> ItemRule:
    """Change quality by a constant amount per day.

    Args:
        rate: Change applied while ``sell_in > 0``.
        past_rate: Change applied once ``sell_in <= 0``.  The check is
            strict, so on the sell date itself the past-due rate applies.
    """

    def apply(item: Item) -> None:
        item.quality += rate if item.sell_in > 0 else past_rate

    return bound_quality_high_low(
        ItemRule(apply, f"standard({_signed(rate)}, {_signed(past_rate)})")
    )


def legendary() -> ItemRule:
    """Quality never changes, even when it sits above :data:`MAX_QUALITY`."""

    def apply(item: Item) -> None:
        pass

    return bound_quality_low(ItemRule(apply, "legendary"))


def backstage_pass() -> ItemRule:
    """Quality rises faster as the concert nears, then drops to zero."""

    def apply(item: Item) -> None:
        if item.sell_in <= 0:
            item.quality = 0
        elif item.sell_in <= BACKSTAGE_CLOSE_DAYS:
            item.quality += 3
        elif item.sell_in <= BACKSTAGE_NEAR_DAYS:
            item.quality += 2
        else:
            item.quality += 1

    return bound_quality_high_low(ItemRule(apply, "backstage_pass"))
