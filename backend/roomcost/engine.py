"""Core summary engine for the room cost summary service.

The SummaryEngine turns raw catalog records into a per-room-type summary:

1. **Deduplication** — Collapse entries for the same component within a
   room type to the one with the highest id.
2. **Aggregation** — Group canonical entries by component, average their
   unit costs, weight by total quantity, and sum into a room total.
3. **Resolution** — Prefer itemized totals; fill room types with no
   itemized entries from the legacy totals.

The engine performs no I/O and keeps no state between runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roomcost.costing.aggregator import aggregate
from roomcost.costing.dedup import count_duplicates, deduplicate
from roomcost.costing.resolver import resolve
from roomcost.models.enums import CostSource
from roomcost.models.summary import CostSummary, SummaryMetadata

if TYPE_CHECKING:
    from collections.abc import Sequence

    from roomcost.models.bom import BOMItem, LegacyRoomCost

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class SummaryEngine:
    """Converts BOM items and legacy totals into a CostSummary.

    Example::

        engine = SummaryEngine()
        summary = engine.summarize(items, legacy_totals)
        summary.to_records()
    """

    def summarize(
        self,
        items: Sequence[BOMItem],
        legacy: Sequence[LegacyRoomCost] = (),
    ) -> CostSummary:
        """Produce the per-room-type summary for one run.

        Args:
            items: Every BOM item retrieved from the catalog.
            legacy: Previously published room totals, used only for room
                types that have no itemized entries.

        Returns:
            A CostSummary with exactly one RoomTotal per room type found in
            either source.
        """
        grouped = deduplicate(items)
        duplicates = count_duplicates(len(items), grouped)
        if duplicates:
            logger.info("Dropped %d superseded BOM entries", duplicates)

        itemized = aggregate(grouped)
        rooms = resolve(itemized, legacy)

        legacy_rooms = sum(1 for r in rooms if r.source == CostSource.LEGACY)
        metadata = SummaryMetadata(
            items_received=len(items),
            duplicates_dropped=duplicates,
            legacy_records=len(legacy),
            itemized_room_types=len(rooms) - legacy_rooms,
            legacy_room_types=legacy_rooms,
            engine_version=ENGINE_VERSION,
        )
        return CostSummary(rooms=rooms, metadata=metadata)
