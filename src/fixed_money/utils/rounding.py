from __future__ import annotations


def round_half_even(numerator: int, denominator: int) -> int:
    """Round the exact rational $numerator / $denominator to the nearest integer.

    Ties (remainder exactly half of $denominator) go to the even neighbour.
    The sign is factored out before rounding and reapplied afterwards, so the
    result is symmetric about zero: `round_half_even(-n, d) == -round_half_even(n, d)`.

    Args:
        numerator: Dividend of the exact value.
        denominator: Divisor of the exact value. Must not be zero.

    Returns:
        The rounded integer.

    Raises:
        ZeroDivisionError: If $denominator is zero.

    Examples:
        >>> round_half_even(25, 10)
        2
        >>> round_half_even(35, 10)
        4
        >>> round_half_even(-25, 10)
        -2
        >>> round_half_even(26, 10)
        3
    """
    # Raise: rounding needs a non-zero divisor
    if denominator == 0:
        raise ZeroDivisionError("$denominator must not be zero")

    negative = (numerator < 0) != (denominator < 0)
    quotient, remainder = divmod(abs(numerator), abs(denominator))

    twice_remainder = remainder * 2
    divisor = abs(denominator)
    if twice_remainder > divisor or (twice_remainder == divisor and quotient % 2 == 1):
        quotient += 1

    return -quotient if negative else quotient


def rescale(value: int, from_digits: int, to_digits: int) -> int:
    """Move an integer scaled by 10**$from_digits to a scale of 10**$to_digits.

    Widening is exact (zeros are appended). Narrowing rounds half to even.

    Args:
        value: Integer holding a number times 10**$from_digits.
        from_digits: Number of fractional digits $value currently carries.
        to_digits: Number of fractional digits wanted.

    Returns:
        The integer holding the same number times 10**$to_digits.
    """
    if to_digits >= from_digits:
        return value * 10 ** (to_digits - from_digits)
    return round_half_even(value, 10 ** (from_digits - to_digits))
