"""Collapse conflicting BOM entries to one canonical entry per component.

Entries describing the same component (same ComponentKey) within the same
room type are reduced to the one with the highest ``id``.  Ids are assigned
monotonically by the catalog, so the highest id is the most recent entry.
Arrival order is irrelevant, which keeps the result stable across
pagination and page-fetch ordering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from roomcost.models.bom import BOMItem, ComponentKey

RoomComponents = dict[str, dict["ComponentKey", "BOMItem"]]


def deduplicate(items: Iterable[BOMItem]) -> RoomComponents:
    """Group items by room type and keep the latest entry per component.

    Returns a mapping ``room_type -> ComponentKey -> BOMItem``.  Room types
    keep the order in which they were first seen.
    """
    grouped: RoomComponents = {}
    for item in items:
        components = grouped.setdefault(item.room_type, {})
        key = item.component_key
        current = components.get(key)
        if current is None or item.id > current.id:
            components[key] = item
    return grouped


def flatten(grouped: RoomComponents) -> list[BOMItem]:
    """Return the canonical items of a grouped mapping as a flat list."""
    return [item for components in grouped.values() for item in components.values()]


def count_duplicates(total_items: int, grouped: RoomComponents) -> int:
    """Number of input items that were dropped as superseded duplicates."""
    kept = sum(len(components) for components in grouped.values())
    return total_items - kept
