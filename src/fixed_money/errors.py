"""Typed errors raised by the money value type.

Every error derives from `MoneyError`, and also from the builtin exception a
caller would naturally expect (`ValueError` or `ZeroDivisionError`), so code
can catch either the specific kind or the generic builtin.
"""


class MoneyError(Exception):
    """Base class for all errors raised by `fixed_money`."""


class ParseError(MoneyError, ValueError):
    """Raised when a decimal string (or Decimal) cannot be parsed into a money value."""


class UnsafeIntegerError(MoneyError, ValueError):
    """Raised when a float is fractional or outside the exactly representable integer range.

    Such values must be passed as decimal strings instead.
    """


class IncompatibleCurrencyError(MoneyError, ValueError):
    """Raised when two money values with different currencies are combined or compared."""


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when dividing by a zero-valued operand."""
