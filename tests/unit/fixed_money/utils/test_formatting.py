import pytest

from fixed_money.utils.formatting import format_scaled


@pytest.mark.parametrize(
    "value, scale, digits, expected",
    [
        (0, 12, 0, "0"),
        (0, 12, 2, "0.00"),
        (5, 1, 0, "0"),
        (-5, 1, 0, "0"),
        (-15, 1, 0, "-2"),
        (-4, 1, 0, "0"),
        (-6, 1, 0, "-1"),
        (7, 3, 3, "0.007"),
        (-7, 3, 3, "-0.007"),
        (123456, 2, 2, "1234.56"),
        (123456, 2, 4, "1234.5600"),
        (123456, 2, 1, "1234.6"),
        (10**30, 0, 0, str(10**30)),
    ],
)
def test_format_scaled(value, scale, digits, expected):
    assert format_scaled(value, scale, digits) == expected


def test_negative_value_that_rounds_to_zero_has_no_sign():
    assert format_scaled(-4_999, 4, 0) == "0"
    assert format_scaled(-49, 4, 2) == "0.00"
    assert not format_scaled(-1, 12, 2).startswith("-")
