"""Output models for the room-type cost summary."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from roomcost.models.enums import CostSource


class ComponentCost(BaseModel):
    """Aggregated cost of one component within a room type."""

    description: str
    make: str
    model: str
    entry_count: int
    average_unit_cost: float
    total_qty: float
    total_cost: float


class RoomTotal(BaseModel):
    """Final total cost for a single room type."""

    room_type: str
    total_cost: float
    source: CostSource
    component_count: int = 0
    components: list[ComponentCost] = Field(default_factory=list)


class SummaryMetadata(BaseModel):
    """Counts describing a single summary run."""

    items_received: int
    duplicates_dropped: int
    legacy_records: int
    itemized_room_types: int
    legacy_room_types: int
    engine_version: str


class CostSummary(BaseModel):
    """Per-room-type cost summary produced by the SummaryEngine."""

    rooms: list[RoomTotal]
    metadata: SummaryMetadata
    generated_at: datetime = Field(default_factory=datetime.now)

    @property
    def grand_total(self) -> float:
        return sum(room.total_cost for room in self.rooms)

    def get(self, room_type: str) -> RoomTotal | None:
        """Return the total for ``room_type``, or None if it is not present."""
        for room in self.rooms:
            if room.room_type == room_type:
                return room
        return None

    def to_records(self) -> list[dict[str, Any]]:
        """Produce the plain ``[{room_type, total_cost}]`` list.

        This is the shape consumed by the reporting UI's table and chart.
        """
        return [
            {"room_type": room.room_type, "total_cost": room.total_cost}
            for room in self.rooms
        ]

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with formatted strings for display."""
        from roomcost.formatting import format_currency, format_room_type

        top_rooms = sorted(self.rooms, key=lambda r: r.total_cost, reverse=True)[:3]

        return {
            "num_room_types": len(self.rooms),
            "grand_total_formatted": format_currency(self.grand_total),
            "rooms": [
                {
                    "room_type": format_room_type(room.room_type),
                    "total_cost_formatted": format_currency(room.total_cost),
                    "source": room.source.value,
                }
                for room in self.rooms
            ],
            "top_rooms": [format_room_type(room.room_type) for room in top_rooms],
            "legacy_room_types": self.metadata.legacy_room_types,
            "generated_at_formatted": self.generated_at.strftime("%Y-%m-%d %H:%M"),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed dict with per-component breakdowns for export."""
        return {
            "grand_total": self.grand_total,
            "rooms": [room.model_dump(mode="json") for room in self.rooms],
            "generated_at": self.generated_at.isoformat(),
            "metadata": self.metadata.model_dump(),
        }
