from __future__ import annotations

from fixed_money.utils.rounding import rescale


def format_scaled(value: int, scale: int, digits: int) -> str:
    """Render an integer scaled by 10**$scale as a plain decimal string with $digits fractional digits.

    Precision beyond $scale is padded with zeros; smaller $digits round half to even.
    Zero never carries a sign.

    Args:
        value: Integer holding a number times 10**$scale.
        scale: Number of fractional digits $value carries.
        digits: Number of fractional digits to render (>= 0).

    Returns:
        String like '-12.50' or '3'.

    Examples:
        >>> format_scaled(2_500, 3, 0)
        '2'
        >>> format_scaled(-5, 1, 0)
        '0'
        >>> format_scaled(15, 1, 3)
        '1.500'
    """
    rounded = rescale(value, scale, digits)

    sign = "-" if rounded < 0 else ""
    text = str(abs(rounded)).rjust(digits + 1, "0")
    if digits == 0:
        return f"{sign}{text}"
    return f"{sign}{text[:-digits]}.{text[-digits:]}"
