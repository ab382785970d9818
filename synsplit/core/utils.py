from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from typing import Any

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")

def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)

def to_decimal(value: Any) -> Decimal:
    """Convert stored or user supplied numbers to Decimal without ever raising.

    Floats go through str() so 0.1 stays 0.1. Anything that is not a finite
    number (None, garbage strings, NaN, booleans) counts as zero.
    """
    if isinstance(value, bool) or value is None:
        return ZERO
    if isinstance(value, Decimal):
        d = value
    else:
        try:
            d = Decimal(str(value))
        except (InvalidOperation, TypeError, ValueError):
            return ZERO
    if not d.is_finite():
        return ZERO
    return d

def amounts_close(a: Decimal, b: Decimal, tolerance: Decimal = CENTS) -> bool:
    return abs(a - b) <= tolerance

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def as_utc(dt: datetime) -> datetime:
    # sqlite hands back naive datetimes, everything we store is UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
