"""Per-room-type cost aggregation over canonical BOM entries.

For each room type, entries are grouped by ComponentKey.  Each group
contributes ``average(unit_cost) * sum(qty)`` and the room total is the sum
of all group contributions.  After deduplication there is one entry per
key, but grouping is kept general so the aggregator gives the same answer
when fed raw, un-deduplicated items.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from roomcost.costing.coercion import coerce_number
from roomcost.models.summary import ComponentCost

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from roomcost.models.bom import BOMItem, ComponentKey

logger = logging.getLogger(__name__)


def _finite(value: float, what: str) -> float:
    # Sums and products of finite inputs can still overflow.
    if math.isfinite(value):
        return value
    logger.debug("Non-finite %s %r treated as 0", what, value)
    return 0.0


@dataclass
class _ComponentAccumulator:
    cost_sum: float = 0.0
    qty_sum: float = 0.0
    count: int = 0

    def add(self, unit_cost: float, qty: float) -> None:
        self.cost_sum += unit_cost
        self.qty_sum += qty
        self.count += 1

    @property
    def average_unit_cost(self) -> float:
        if self.count == 0:
            return 0.0
        return _finite(self.cost_sum / self.count, "average unit cost")

    @property
    def total_qty(self) -> float:
        return _finite(self.qty_sum, "total quantity")

    @property
    def total_cost(self) -> float:
        return _finite(self.average_unit_cost * self.total_qty, "component cost")


@dataclass(frozen=True)
class RoomAggregate:
    """Aggregated total for one room type, with its component breakdown."""

    room_type: str
    total_cost: float
    components: list[ComponentCost] = field(default_factory=list)


def aggregate_room(room_type: str, items: Iterable[BOMItem]) -> RoomAggregate:
    """Aggregate the items of a single room type into a RoomAggregate."""
    groups: dict[ComponentKey, _ComponentAccumulator] = {}
    for item in items:
        acc = groups.setdefault(item.component_key, _ComponentAccumulator())
        acc.add(coerce_number(item.unit_cost), coerce_number(item.qty))

    components = [
        ComponentCost(
            description=key.description,
            make=key.make,
            model=key.model,
            entry_count=acc.count,
            average_unit_cost=acc.average_unit_cost,
            total_qty=acc.total_qty,
            total_cost=acc.total_cost,
        )
        for key, acc in groups.items()
    ]
    total = _finite(sum(c.total_cost for c in components), "room total")
    return RoomAggregate(room_type=room_type, total_cost=total, components=components)


def aggregate(
    grouped: Mapping[str, Mapping[ComponentKey, BOMItem]],
) -> dict[str, RoomAggregate]:
    """Aggregate a deduplicated ``room_type -> key -> item`` mapping."""
    return {
        room_type: aggregate_room(room_type, components.values())
        for room_type, components in grouped.items()
    }


def aggregate_items(items: Iterable[BOMItem]) -> dict[str, RoomAggregate]:
    """Aggregate a flat item sequence without deduplicating first."""
    by_room: dict[str, list[BOMItem]] = {}
    for item in items:
        by_room.setdefault(item.room_type, []).append(item)
    return {
        room_type: aggregate_room(room_type, room_items)
        for room_type, room_items in by_room.items()
    }
