from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

_CENTS = Decimal("0.01")


def to_decimal(value) -> Optional[Decimal]:
    """Money goes into Numeric(18, 2) columns rounded half-up to cents."""
    if value is None:
        return None
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def to_float(value) -> Optional[float]:
    if value is None:
        return None
    return float(value)
