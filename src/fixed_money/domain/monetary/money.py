from __future__ import annotations

import logging
from decimal import Decimal

from fixed_money.errors import DivisionByZeroError, IncompatibleCurrencyError
from fixed_money.utils.formatting import format_scaled
from fixed_money.utils.numeric_tools import SCALE, MoneyLike, parse_scaled
from fixed_money.utils.rounding import rescale, round_half_even

logger = logging.getLogger(__name__)

_UNIT = 10**SCALE
_OPERAND_TYPES = (str, int, float, Decimal)


class Money:
    """Represents an exact monetary amount tagged with a currency.

    The amount is stored as a Python int holding the value times 10**SCALE, so
    there is no upper limit and no binary floating-point noise. Every result is
    rounded half to even back to SCALE fractional digits.

    The currency is an opaque, case-sensitive tag. Two values are compatible only
    when their tags are exactly equal.

    Instances are immutable; every operation returns a new `Money`.

    Examples:
        >>> Money("0.1", "USD").add("0.2").to_fixed(2)
        '0.30'
        >>> Money("3.045", "ETH").divide(3).to_fixed(2)
        '1.02'
    """

    __slots__ = ("_scaled", "_currency")

    def __init__(self, value: MoneyLike, currency: str):
        """Initialize Money with value and currency.

        Args:
            value: Decimal string, int, safe integral float or Decimal.
            currency (str): Currency tag, stored verbatim.

        Raises:
            ParseError: If $value is a malformed decimal string.
            UnsafeIntegerError: If $value is a float that is not a safe integer.
            TypeError: If $value or $currency has an unsupported type.
            ValueError: If $currency is empty.
        """
        _validate_currency(currency)
        object.__setattr__(self, "_scaled", parse_scaled(value))
        object.__setattr__(self, "_currency", currency)

    @classmethod
    def from_scaled(cls, scaled: int, currency: str) -> Money:
        """Wrap an integer that already holds a value times 10**SCALE.

        Raises:
            TypeError: If $scaled is not an int.
        """
        # Raise: magnitude must be an exact integer at SCALE digits
        if isinstance(scaled, bool) or not isinstance(scaled, int):
            raise TypeError(f"$scaled must be an int, but provided value is: {scaled!r}")
        _validate_currency(currency)
        result = cls.__new__(cls)
        object.__setattr__(result, "_scaled", scaled)
        object.__setattr__(result, "_currency", currency)
        return result

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
            ParseError: If the value part is not a valid decimal string.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency'")

        value_part, currency_part = parts
        return cls(value_part, currency_part)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set attribute '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot delete attribute '{name}'")

    def __reduce__(self):
        return (Money.from_scaled, (self._scaled, self._currency))

    # region Properties

    @property
    def currency(self) -> str:
        """Get the currency tag."""
        return self._currency

    @property
    def scaled(self) -> int:
        """Get the raw integer holding the value times 10**SCALE."""
        return self._scaled

    @property
    def amount(self) -> Decimal:
        """Get the exact value as a Decimal with SCALE fractional digits."""
        return Decimal(self.to_fixed(SCALE))

    @property
    def sign(self) -> int:
        """Get -1, 0 or 1 according to the sign of the value."""
        return (self._scaled > 0) - (self._scaled < 0)

    # endregion

    # region Arithmetic

    def add(self, other: Money | MoneyLike) -> Money:
        """Return the exact sum of this value and $other.

        A raw scalar $other takes this value's currency.

        Raises:
            IncompatibleCurrencyError: If $other is Money with a different currency.
        """
        return Money.from_scaled(self._scaled + self._coerce(other, check_currency=True), self._currency)

    def subtract(self, other: Money | MoneyLike) -> Money:
        """Return the exact difference of this value and $other.

        Raises:
            IncompatibleCurrencyError: If $other is Money with a different currency.
        """
        return Money.from_scaled(self._scaled - self._coerce(other, check_currency=True), self._currency)

    def multiply(self, other: Money | MoneyLike) -> Money:
        """Return this value multiplied by $other, rounded half to even to SCALE digits.

        $other is treated as a plain factor: if it is Money, its currency is ignored
        and the result keeps this value's currency.
        """
        product = self._scaled * self._coerce(other, check_currency=False)
        if product % _UNIT:
            logger.debug(f"Rounding product of {self!r} and {other!r} to {SCALE} fractional digits")
        return Money.from_scaled(round_half_even(product, _UNIT), self._currency)

    def divide(self, other: Money | MoneyLike) -> Money:
        """Return this value divided by $other, rounded half to even to SCALE digits.

        The remainder of the integer division is kept exactly, so the rounding
        decision is taken on the true quotient. As with `multiply`, the currency of
        a Money divisor is ignored.

        Raises:
            DivisionByZeroError: If $other is zero.
        """
        divisor = self._coerce(other, check_currency=False)
        # Raise: dividing by zero has no monetary result
        if divisor == 0:
            raise DivisionByZeroError(f"Cannot divide {self!r} by zero ($other = {other!r})")

        numerator = self._scaled * _UNIT
        if numerator % divisor:
            logger.debug(f"Rounding quotient of {self!r} and {other!r} to {SCALE} fractional digits")
        return Money.from_scaled(round_half_even(numerator, divisor), self._currency)

    def negate(self) -> Money:
        return Money.from_scaled(-self._scaled, self._currency)

    def __add__(self, other):
        if not isinstance(other, (Money, *_OPERAND_TYPES)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        """Right addition: number + Money."""
        return self.__add__(other)

    def __sub__(self, other):
        if not isinstance(other, (Money, *_OPERAND_TYPES)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        """Right subtraction: number - Money."""
        if not isinstance(other, _OPERAND_TYPES):
            return NotImplemented
        return Money.from_scaled(parse_scaled(other) - self._scaled, self._currency)

    def __mul__(self, other):
        if not isinstance(other, (Money, *_OPERAND_TYPES)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        if not isinstance(other, (Money, *_OPERAND_TYPES)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        """Right division: number / Money (not supported)."""
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return Money.from_scaled(abs(self._scaled), self._currency)

    # endregion

    # region Rounding and formatting

    def to_fixed(self, digits: int) -> str:
        """Render the value as a decimal string with exactly $digits fractional digits.

        Digits beyond SCALE are padded with zeros; fewer digits round half to even.
        A leading '-' appears only for non-zero negative results.

        Args:
            digits (int): Number of fractional digits, >= 0.

        Returns:
            str: For example '1.000' or '-2'.

        Raises:
            ValueError: If $digits is negative.
        """
        _validate_digits(digits)
        return format_scaled(self._scaled, SCALE, digits)

    def round(self, digits: int) -> Money:
        """Return a new Money rounded half to even to $digits fractional digits."""
        _validate_digits(digits)
        if digits >= SCALE:
            return self
        return Money.from_scaled(rescale(rescale(self._scaled, SCALE, digits), digits, SCALE), self._currency)

    def allocate(self, parts: int, digits: int) -> list[Money]:
        """Split this value into $parts shares with $digits fractional digits.

        The value is first rounded to $digits. Shares differ by at most one smallest
        unit (10**-$digits); leftover units go to the first shares, so the shares
        always sum exactly to `self.round(digits)`.

        Args:
            parts (int): Number of shares, > 0.
            digits (int): Precision of each share, between 0 and SCALE.

        Returns:
            list[Money]: The shares, in order.

        Raises:
            ValueError: If $parts is not positive or $digits is out of range.
        """
        if isinstance(parts, bool) or not isinstance(parts, int):
            raise TypeError(f"$parts must be an int, but provided value is: {parts!r}")
        # Raise: at least one share is needed
        if parts <= 0:
            raise ValueError(f"$parts must be positive, but provided value is: {parts}")
        _validate_digits(digits)
        # Raise: shares are stored with SCALE digits, finer units cannot be represented
        if digits > SCALE:
            raise ValueError(f"$digits must be at most {SCALE}, but provided value is: {digits}")

        units = rescale(self._scaled, SCALE, digits)
        share, leftover = divmod(abs(units), parts)
        direction = -1 if units < 0 else 1

        result = []
        for i in range(parts):
            share_units = (share + (1 if i < leftover else 0)) * direction
            result.append(Money.from_scaled(rescale(share_units, digits, SCALE), self._currency))
        return result

    def clamp(self, lower: Money | MoneyLike | None = None, upper: Money | MoneyLike | None = None) -> Money:
        """Return a new Money with the value clamped into [$lower, $upper].

        Currency always stays the same as $self.currency.

        Args:
            lower: Optional lower bound. If None, there is no lower bound.
            upper: Optional upper bound. If None, there is no upper bound.

        Returns:
            Money: New instance with value clamped into the requested range.

        Raises:
            ValueError: If both bounds are provided and $lower > $upper.
            IncompatibleCurrencyError: If a Money bound has a different currency.
        """
        lower_value = self._coerce(lower, check_currency=True) if lower is not None else None
        upper_value = self._coerce(upper, check_currency=True) if upper is not None else None

        # Raise: ensure the requested range is not inverted
        if lower_value is not None and upper_value is not None and lower_value > upper_value:
            raise ValueError(f"Cannot call `clamp` because $lower ({lower}) > $upper ({upper})")

        new_value = self._scaled
        if lower_value is not None:
            new_value = max(new_value, lower_value)
        if upper_value is not None:
            new_value = min(new_value, upper_value)
        return Money.from_scaled(new_value, self._currency)

    # endregion

    # region Comparison

    def compare(self, other: Money | MoneyLike) -> int:
        """Return -1, 0 or 1 as this value is below, equal to or above $other.

        Raises:
            IncompatibleCurrencyError: If $other is Money with a different currency.
        """
        other_value = self._coerce(other, check_currency=True)
        return (self._scaled > other_value) - (self._scaled < other_value)

    def is_zero(self) -> bool:
        return self._scaled == 0

    def is_positive(self) -> bool:
        return self._scaled > 0

    def is_negative(self) -> bool:
        return self._scaled < 0

    def __bool__(self) -> bool:
        return self._scaled != 0

    def __eq__(self, other) -> bool:
        """Check equality with another Money object (currency and value)."""
        if not isinstance(other, Money):
            return False
        return self._currency == other._currency and self._scaled == other._scaled

    def __hash__(self) -> int:
        return hash((self._scaled, self._currency))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    # endregion

    # region Helpers

    def _coerce(self, other: Money | MoneyLike, check_currency: bool) -> int:
        """Resolve $other into a scaled int; raw scalars take this value's currency."""
        if isinstance(other, Money):
            if check_currency:
                self._check_same_currency(other)
            return other._scaled
        return parse_scaled(other)

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            IncompatibleCurrencyError: If currencies don't match.
        """
        if self._currency != other._currency:
            raise IncompatibleCurrencyError(f"Cannot operate on different currencies: '{self._currency}' and '{other._currency}'")

    # endregion

    def __str__(self) -> str:
        """Return string like '1000.500000000000 USD'."""
        return f"{self.to_fixed(SCALE)} {self._currency}"

    def __repr__(self) -> str:
        """Return string like "Money('1000.500000000000', 'USD')"."""
        return f"{self.__class__.__name__}('{self.to_fixed(SCALE)}', '{self._currency}')"


def _validate_currency(currency: str) -> None:
    # Raise: currency is an opaque, non-empty tag
    if not isinstance(currency, str):
        raise TypeError(f"$currency must be a str, but provided value is: {currency!r}")
    if not currency:
        raise ValueError(f"$currency must be a non-empty string, but provided value is: '{currency}'")


def _validate_digits(digits: int) -> None:
    # Raise: number of fractional digits must be a non-negative int
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise TypeError(f"$digits must be an int, but provided value is: {digits!r}")
    if digits < 0:
        raise ValueError(f"$digits must be non-negative, but provided value is: {digits}")
