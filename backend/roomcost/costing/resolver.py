"""Merge itemized room totals with previously published legacy totals.

Itemized totals always take precedence, even when they come to zero.  A
legacy total is used only for a room type with no itemized entries at all.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roomcost.models.enums import CostSource
from roomcost.models.summary import RoomTotal

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from roomcost.costing.aggregator import RoomAggregate
    from roomcost.models.bom import LegacyRoomCost

logger = logging.getLogger(__name__)


def latest_legacy_totals(legacy: Iterable[LegacyRoomCost]) -> dict[str, LegacyRoomCost]:
    """Reduce legacy records to one per room type.

    When a room type is listed more than once, the record with the highest
    id wins; records without an id never replace an earlier one.
    """
    by_room: dict[str, LegacyRoomCost] = {}
    for record in legacy:
        current = by_room.get(record.room_type)
        if current is None:
            by_room[record.room_type] = record
        elif record.id is not None and (current.id is None or record.id > current.id):
            by_room[record.room_type] = record
    return by_room


def resolve(
    itemized: Mapping[str, RoomAggregate],
    legacy: Iterable[LegacyRoomCost],
) -> list[RoomTotal]:
    """Produce one RoomTotal per room type seen in either source.

    Itemized room types come first in first-seen order, followed by
    legacy-only room types in the order the legacy source listed them.
    """
    results: list[RoomTotal] = [
        RoomTotal(
            room_type=room_type,
            total_cost=agg.total_cost,
            source=CostSource.ITEMIZED,
            component_count=len(agg.components),
            components=agg.components,
        )
        for room_type, agg in itemized.items()
    ]

    for room_type, record in latest_legacy_totals(legacy).items():
        if room_type in itemized:
            logger.debug(
                "Legacy total for %r ignored; itemized data present", room_type
            )
            continue
        results.append(
            RoomTotal(
                room_type=room_type,
                total_cost=record.total_cost,
                source=CostSource.LEGACY,
            )
        )
    return results
