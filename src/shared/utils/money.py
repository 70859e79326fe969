from decimal import Decimal
from typing import Optional, Union

Number = Union[Decimal, int, float]


def to_number(value: Optional[Number]) -> Optional[float]:
    """Render a stored money amount as a JSON number."""
    if value is None:
        return None
    return float(value)


def to_decimal_amount(value: Optional[Number]) -> Decimal:
    """Aggregates over empty sets come back as NULL; treat them as zero."""
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))
