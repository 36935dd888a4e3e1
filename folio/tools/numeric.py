"""Safe numeric extraction for provider payloads.

Providers hand back numbers as JSON numbers, numeric strings ("189.43"), or
garbage. Everything parsed from a payload goes through ``safe_number`` so the
rest of the code only ever sees a finite float or ``None``.
"""
import math
from typing import Any, Iterable, Optional


def safe_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None``.

    Booleans are rejected (they would silently become 0/1). NaN and infinity
    map to ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(num) or math.isinf(num):
        return None
    return num


def first_number(*values: Any) -> Optional[float]:
    """First candidate that parses as a finite number."""
    for value in values:
        num = safe_number(value)
        if num is not None:
            return num
    return None


def finite(values: Iterable[Any]) -> list[float]:
    return [n for n in (safe_number(v) for v in values) if n is not None]


def pct_diff(current: Optional[float], ref: Optional[float]) -> Optional[float]:
    """Percentage deviation of ``current`` from ``ref``; ``None`` when undefined."""
    if current is None or ref is None:
        return None
    try:
        result = (current - ref) / ref * 100
    except (ZeroDivisionError, OverflowError):
        return None
    return safe_number(result)
