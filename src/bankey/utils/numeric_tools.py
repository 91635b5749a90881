from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so `0.1`
    becomes `Decimal("0.1")` and not the exact binary expansion of the float.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool.
        decimal.InvalidOperation: If $value has no decimal representation.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass, but `True` is never a monetary amount
    if isinstance(value, bool):
        raise TypeError(f"Cannot call `as_decimal` because $value ({value}) is a bool")

    return Decimal(str(value))


def decimal_digit_count(value: Decimal) -> int:
    """Return how many decimal digits are needed to hold finite $value exactly.

    Counts both the coefficient digits and the zeros implied by a positive
    exponent (e.g. `Decimal("1E+3")` needs 4 digits).
    """
    _, digits, exponent = value.as_tuple()
    return len(digits) + abs(exponent)
