from decimal import Decimal

import pytest

from fixed_money.errors import MoneyError, ParseError, UnsafeIntegerError
from fixed_money.utils.numeric_tools import MAX_SAFE_INTEGER, SCALE, parse_scaled

# Constants
UNIT = 10**SCALE


def test_scale_is_twelve_digits():
    assert SCALE == 12
    assert MAX_SAFE_INTEGER == 9_007_199_254_740_991


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", UNIT),
        ("+1", UNIT),
        ("-1", -UNIT),
        ("1.5", 15 * UNIT // 10),
        (".35", 35 * UNIT // 100),
        ("-.25", -25 * UNIT // 100),
        ("7.", 7 * UNIT),
        ("0001.000", UNIT),
        ("-0", 0),
        ("0.000000000001", 1),
        ("123456789012345678901234567890", 123456789012345678901234567890 * UNIT),
    ],
)
def test_parse_decimal_strings(text, expected):
    assert parse_scaled(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.0000000000005", 0),
        ("0.0000000000015", 2),
        ("0.0000000000025", 2),
        ("0.00000000000250001", 3),
        ("-0.0000000000015", -2),
        ("-0.0000000000005", 0),
        ("0.0000000000014999999", 1),
    ],
)
def test_parse_rounds_extra_fraction_half_even(text, expected):
    assert parse_scaled(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", ".", "-", "+.", "abc", "1.2.3", "--1", "+-1", "1-", "1e5", " 1", "1 ", "1_000", "0x10", "1,5", "١٢", "1\n"],
)
def test_malformed_strings_raise_parse_error(text):
    with pytest.raises(ParseError):
        parse_scaled(text)


def test_parse_error_is_value_error_and_money_error():
    with pytest.raises(ValueError):
        parse_scaled("nope")
    with pytest.raises(MoneyError):
        parse_scaled("nope")


def test_ints_are_exact_at_any_magnitude():
    assert parse_scaled(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER * UNIT
    assert parse_scaled(2**80) == 2**80 * UNIT
    assert parse_scaled(-3) == -3 * UNIT


def test_integral_floats_within_safe_range_are_accepted():
    assert parse_scaled(20.0) == 20 * UNIT
    assert parse_scaled(float(MAX_SAFE_INTEGER)) == MAX_SAFE_INTEGER * UNIT
    assert parse_scaled(-float(MAX_SAFE_INTEGER)) == -MAX_SAFE_INTEGER * UNIT


@pytest.mark.parametrize("value", [1.1, 0.5, -2.25, 2.0**53, -(2.0**53), 1e300, float("nan"), float("inf"), float("-inf")])
def test_unsafe_floats_raise_unsafe_integer_error(value):
    with pytest.raises(UnsafeIntegerError):
        parse_scaled(value)


def test_decimals_are_parsed_exactly():
    assert parse_scaled(Decimal("1.5")) == 15 * UNIT // 10
    assert parse_scaled(Decimal("-0.25")) == -25 * UNIT // 100
    assert parse_scaled(Decimal("1E+3")) == 1000 * UNIT
    assert parse_scaled(Decimal("-0")) == 0
    assert parse_scaled(Decimal("0.0000000000025")) == 2


def test_tiny_decimals_round_to_zero_without_expanding_exponent():
    assert parse_scaled(Decimal("1E-300000000")) == 0
    assert parse_scaled(Decimal("-9.99E-300000000")) == 0
    assert parse_scaled(Decimal("9E-14")) == 0
    assert parse_scaled(Decimal("5E-13")) == 0
    assert parse_scaled(Decimal("6E-13")) == 1
    assert parse_scaled(Decimal("99E-14")) == 1
    assert parse_scaled(Decimal("-99E-14")) == -1


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity"), Decimal("sNaN")])
def test_non_finite_decimals_raise_parse_error(value):
    with pytest.raises(ParseError):
        parse_scaled(value)


@pytest.mark.parametrize("value", [True, False, None, [1], object()])
def test_unsupported_types_raise_type_error(value):
    with pytest.raises(TypeError):
        parse_scaled(value)
