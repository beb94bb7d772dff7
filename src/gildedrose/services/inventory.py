"""InventoryService — one day's update and rule lookup for a set of items."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from gildedrose.domain.items import Item
from gildedrose.domain.rules import get_quality_rule, get_sell_in_rule, is_special
from gildedrose.domain.update import update_quality
from gildedrose.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class InventoryService:
    """Service wrapper around an inventory owned by the caller.

    The service mutates the items it was given; it keeps no other state.

    Usage::

        svc = InventoryService(items)
        result = svc.update()
    """

    def __init__(self, items: Iterable[Item]) -> None:
        self._items = list(items)

    @property
    def items(self) -> list[Item]:
        return self._items

    def update(self) -> ServiceResult:
        """Advance the inventory by one day.

        ``data.items`` lists every item after the update together with its
        ``sell_in_before`` and ``quality_before`` values.  An item with a
        blank name fails the whole update with ``INVALID_ITEM`` before any
        item is touched.
        """
        for index, item in enumerate(self._items):
            if not item.name.strip():
                return ServiceResult(
                    ok=False,
                    op="update_quality",
                    error=ServiceError(
                        code="INVALID_ITEM",
                        message="Item name must not be blank",
                        detail={"index": index, "name": item.name},
                    ),
                )

        warnings: list[str] = []
        if not self._items:
            warnings.append("Inventory is empty; nothing to update")

        before = [(item.sell_in, item.quality) for item in self._items]
        update_quality(self._items)

        rows: list[dict[str, Any]] = []
        for item, (sell_in, quality) in zip(self._items, before, strict=True):
            rows.append(
                {
                    "name": item.name,
                    "sell_in": item.sell_in,
                    "quality": item.quality,
                    "sell_in_before": sell_in,
                    "quality_before": quality,
                }
            )

        logger.debug("Updated %d items", len(rows))
        return ServiceResult(
            ok=True,
            op="update_quality",
            data={"items": rows, "count": len(rows)},
            warnings=warnings,
        )

    @staticmethod
    def describe_rules(names: Iterable[str]) -> ServiceResult:
        """Report which quality and sell-in rule each name resolves to."""
        rows = [
            {
                "name": name,
                "quality_rule": get_quality_rule(name).description,
                "sell_in_rule": get_sell_in_rule(name).description,
                "special": is_special(name),
            }
            for name in names
        ]
        return ServiceResult(
            ok=True,
            op="describe_rules",
            data={"items": rows, "count": len(rows)},
        )
