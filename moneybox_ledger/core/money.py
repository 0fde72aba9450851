"""
Money helpers.

Amounts travel through the ledger as ``Decimal`` so repeated credits and
debits never pick up binary floating point drift. Storage keeps integer
minor units (pence), so conversion in either direction has to be exact.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import InvalidAmountError

MINOR_UNIT_EXPONENT = 2
_MINOR_UNIT = Decimal(1).scaleb(-MINOR_UNIT_EXPONENT)

AmountLike = Union[Decimal, int, str]


def to_amount(value: AmountLike) -> Decimal:
    """Validate a caller-supplied amount and return it as a positive Decimal.

    Floats and booleans are refused outright instead of being converted, and
    so is anything finer than a minor unit.
    """
    if isinstance(value, (bool, float)):
        raise InvalidAmountError(
            f"Amount must be a Decimal, int or str, got {type(value).__name__}"
        )
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {amount}")
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    if amount.as_tuple().exponent < -MINOR_UNIT_EXPONENT:
        raise InvalidAmountError(
            f"Amount must have at most {MINOR_UNIT_EXPONENT} decimal places, got {amount}"
        )
    return amount


def to_minor_units(amount: Decimal) -> int:
    minor = amount.scaleb(MINOR_UNIT_EXPONENT)
    if minor != minor.to_integral_value():
        raise ValueError(f"{amount} is not a whole number of minor units")
    return int(minor)


def from_minor_units(minor: int) -> Decimal:
    return (Decimal(minor) * _MINOR_UNIT).quantize(_MINOR_UNIT)
