"""
Decimal helpers shared by the savings engine.

Every monetary value in the engine is a ``decimal.Decimal``. Floats coming
from the transport layer are converted through ``str`` so that ``375.1``
stays ``Decimal("375.1")`` instead of its binary approximation.
"""

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal
from typing import Optional, Union

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
CENTS = Decimal("0.01")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    """Convert a number to Decimal, passing None through."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_up_to_multiple(amount: Decimal, multiple: Decimal = HUNDRED) -> Decimal:
    """
    Round ``amount`` up to the nearest multiple.

    Rounds toward positive infinity, so negative amounts move toward zero
    (``-10`` becomes ``0``).
    """
    units = (amount / multiple).to_integral_value(rounding=ROUND_CEILING)
    return units * multiple


def round_money(value: Decimal) -> Decimal:
    """Round to two decimal places, half up."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)
