__version__ = "0.0.1"

from fixed_money.domain.monetary.money import Money
from fixed_money.errors import (
    DivisionByZeroError,
    IncompatibleCurrencyError,
    MoneyError,
    ParseError,
    UnsafeIntegerError,
)
from fixed_money.utils.numeric_tools import MAX_SAFE_INTEGER, SCALE
from fixed_money.utils.rounding import round_half_even

__all__ = [
    "Money",
    "MoneyError",
    "ParseError",
    "UnsafeIntegerError",
    "IncompatibleCurrencyError",
    "DivisionByZeroError",
    "SCALE",
    "MAX_SAFE_INTEGER",
    "round_half_even",
]
