"""Room-type cost summary for AV bills of materials.

Usage::

    from roomcost import create_default_pipeline

    result = create_default_pipeline().run()
    for row in result.summary.to_records():
        print(row["room_type"], row["total_cost"])

Or, with records already in memory::

    from roomcost import BOMItem, SummaryEngine

    summary = SummaryEngine().summarize(items, legacy_totals)
"""

from roomcost.engine import SummaryEngine
from roomcost.factory import create_default_pipeline
from roomcost.models.bom import BOMItem, ComponentKey, LegacyRoomCost
from roomcost.models.enums import CostSource
from roomcost.models.summary import (
    ComponentCost,
    CostSummary,
    RoomTotal,
    SummaryMetadata,
)

__all__ = [
    "BOMItem",
    "ComponentCost",
    "ComponentKey",
    "CostSource",
    "CostSummary",
    "LegacyRoomCost",
    "RoomTotal",
    "SummaryEngine",
    "SummaryMetadata",
    "create_default_pipeline",
]
