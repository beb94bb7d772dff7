"""The nightly update: one simulated day for a whole inventory."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gildedrose.domain.items import Item
from gildedrose.domain.rules import get_quality_rule, get_sell_in_rule

logger = logging.getLogger(__name__)


def update_quality(items: Iterable[Item]) -> None:
    """Advance every item in *items* by one day, in place.

    Quality is updated first so that quality rules see the item's
    ``sell_in`` as it stood before today's countdown.
    """
    for item in items:
        sell_in, quality = item.sell_in, item.quality
        get_quality_rule(item.name)(item)
        get_sell_in_rule(item.name)(item)
        logger.debug(
            "Updated %r: sell_in %d -> %d, quality %d -> %d",
            item.name,
            sell_in,
            item.sell_in,
            quality,
            item.quality,
        )
