"""Numeric coercion for loosely typed catalog fields.

The catalog stores ``unit_cost`` and ``qty`` as either numbers or numeric
strings, and hand-entered rows occasionally hold garbage.  Everything is
coerced to a finite float at the point it enters aggregation.  Unparseable
values become ``0.0``: an unparseable cost is treated as free and an
unparseable quantity as zero units.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

# Plain decimal with optional exponent; rejects "1_000" and non-ASCII digits.
_NUMERIC_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def coerce_number(value: Any) -> float:
    """Coerce a number or numeric string to a finite float.

    Returns 0.0 for ``None``, booleans, empty or non-numeric strings,
    NaN, infinities and any other type.
    """
    if isinstance(value, bool) or value is None:
        return 0.0

    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            logger.debug("Out-of-range numeric value treated as 0")
            return 0.0
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_RE.fullmatch(text):
            logger.debug("Unparseable numeric value %r treated as 0", value)
            return 0.0
        result = float(text)
    else:
        logger.debug("Unsupported numeric type %s treated as 0", type(value).__name__)
        return 0.0

    if not math.isfinite(result):
        logger.debug("Non-finite numeric value %r treated as 0", value)
        return 0.0
    return result
