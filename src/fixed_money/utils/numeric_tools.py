from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Final, TypeAlias

from fixed_money.errors import ParseError, UnsafeIntegerError
from fixed_money.utils.rounding import rescale

logger = logging.getLogger(__name__)

# Number of fractional digits every money value carries internally
SCALE: Final[int] = 12

# Largest integer a 64-bit float represents exactly together with all its neighbours
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Raw (currency-less) scalar accepted wherever a money value is expected
MoneyLike: TypeAlias = str | int | float | Decimal

_DECIMAL_STRING = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")


def parse_scaled(value: MoneyLike) -> int:
    """Convert a raw scalar into an integer holding the value times 10**SCALE.

    Strings and Decimals may carry any number of fractional digits; digits beyond
    SCALE are rounded half to even. Floats are accepted only when they hold a safe
    integer, because a fractional float is usually an approximation of the decimal
    the caller meant.

    Args:
        value: Decimal string, int, safe integral float or Decimal.

    Returns:
        The scaled integer.

    Raises:
        ParseError: If a string is malformed or a Decimal is not finite.
        UnsafeIntegerError: If a float is fractional, non-finite or beyond MAX_SAFE_INTEGER.
        TypeError: If $value has an unsupported type.
    """
    # Raise: bool is an int subclass, but True/False is never a meaningful amount
    if isinstance(value, bool):
        raise TypeError(f"$value must be a str, int, float or Decimal, but provided value is: {value!r}")

    if isinstance(value, str):
        return _parse_decimal_string(value)

    if isinstance(value, int):
        return value * 10**SCALE

    if isinstance(value, float):
        # Raise: only floats that hold an exactly representable integer are accepted
        if not math.isfinite(value) or not value.is_integer() or abs(value) > MAX_SAFE_INTEGER:
            raise UnsafeIntegerError(
                f"$value {value!r} is not a safe integer (|value| <= {MAX_SAFE_INTEGER}); pass it as a decimal string instead",
            )
        return int(value) * 10**SCALE

    if isinstance(value, Decimal):
        return _parse_decimal(value)

    raise TypeError(f"$value must be a str, int, float or Decimal, but provided value is: {value!r}")


def _parse_decimal_string(text: str) -> int:
    match = _DECIMAL_STRING.fullmatch(text)
    # Raise: whole string must be sign, digits and at most one decimal point
    if match is None:
        raise ParseError(f"$value '{text}' is not a valid decimal string")

    sign, integer_part, fraction_part = match.group(1), match.group(2), match.group(3) or ""
    # Raise: at least one digit is required
    if not integer_part and not fraction_part:
        raise ParseError(f"$value '{text}' does not contain any digits")

    unscaled = int(integer_part + fraction_part)
    if sign == "-":
        unscaled = -unscaled

    if len(fraction_part) > SCALE:
        logger.debug(f"Rounding $value '{text}' from {len(fraction_part)} to {SCALE} fractional digits")
    return rescale(unscaled, len(fraction_part), SCALE)


def _parse_decimal(value: Decimal) -> int:
    # Raise: NaN and Infinity have no monetary meaning
    if not value.is_finite():
        raise ParseError(f"$value must be a finite Decimal, but provided value is: {value}")

    sign, digits, exponent = value.as_tuple()
    coefficient = int("".join(str(d) for d in digits) or "0")
    if sign:
        coefficient = -coefficient

    if -exponent > SCALE:
        logger.debug(f"Rounding $value {value} from {-exponent} to {SCALE} fractional digits")
        # Value is below a tenth of the smallest unit and rounds to zero
        if -exponent - SCALE > len(digits):
            return 0
    return rescale(coefficient, -exponent, SCALE)
