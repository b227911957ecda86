"""Domain models for the room cost summary service."""

from roomcost.models.bom import (
    BOMItem,
    CatalogPage,
    ComponentKey,
    LegacyRoomCost,
    PageMeta,
)
from roomcost.models.enums import CostSource
from roomcost.models.summary import (
    ComponentCost,
    CostSummary,
    RoomTotal,
    SummaryMetadata,
)

__all__ = [
    "BOMItem",
    "CatalogPage",
    "ComponentCost",
    "ComponentKey",
    "CostSource",
    "CostSummary",
    "LegacyRoomCost",
    "PageMeta",
    "RoomTotal",
    "SummaryMetadata",
]
