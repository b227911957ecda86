"""Enums for the roomcost domain models."""

from enum import StrEnum


class CostSource(StrEnum):
    """Where a room type's total cost came from."""

    ITEMIZED = "itemized"
    LEGACY = "legacy"
