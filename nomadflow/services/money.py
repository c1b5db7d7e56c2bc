"""Money / rounding helpers.

Centralized so conversion, longevity and lifestyle lookups use identical
rounding semantics: half away from zero (``Decimal.ROUND_HALF_UP``), so
``2.5 -> 3`` and ``-2.5 -> -3``.
"""

from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

_WHOLE_FLOAT = 2.0**52


def round_half_up(value: float) -> int:
    # floats this large are already whole; quantize would exceed Decimal precision
    if abs(value) >= _WHOLE_FLOAT:
        return int(value)
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def as_finite(value: object) -> Optional[float]:
    """Return ``value`` as a float when it is a finite real number, else None.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number
