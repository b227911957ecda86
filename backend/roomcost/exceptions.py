"""Custom exception hierarchy for the room cost summary service."""

from __future__ import annotations


class RoomCostError(Exception):
    """Base exception for all roomcost errors."""


class ConfigurationError(RoomCostError):
    """Raised when required settings are missing or malformed."""


class AggregationError(RoomCostError):
    """Raised when a summary run fails and no summary can be produced."""


class CatalogFetchError(AggregationError):
    """Raised when a catalog page cannot be fetched or parsed."""


class PaginationExhaustedError(AggregationError):
    """Raised when the catalog never reports a reachable final page."""


class BomImportError(RoomCostError):
    """Raised when a BOM spreadsheet cannot be read."""
