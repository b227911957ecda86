"""Formatting helpers for room cost summary output.

Provides human-readable formatting for currency amounts and room type
labels as shown in the reporting UI.
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$1,234,567')
    - Amounts < $10,000: with cents (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_room_type(room_type: str) -> str:
    """Return a display label for a room type, 'Unknown' when blank."""
    return room_type.strip() or "Unknown"
