from __future__ import annotations

import logging
import math
from decimal import Decimal
from numbers import Real

from float_handler.errors import InvalidArgumentError
from float_handler.formatting.babel_formatter import get_default_currency_formatter
from float_handler.formatting.protocol import CurrencyFormatter
from float_handler.utils.float_tools import FloatLike, ieee_divide, to_fixed_point

logger = logging.getLogger(__name__)


class DecimalValue:
    """Float wrapper with a fixed number of decimal places and epsilon-based comparison.

    The stored value is always normalized: rounded half away from zero to $decimals places
    and passed through a fixed-point text round-trip, so it carries no binary noise beyond
    that precision.

    `increase` and `decrease` mutate the receiver in place, while `times` and `divided_by`
    return new instances. Mutating operations are not thread-safe.

    Attributes:
        value (float): The normalized value.
        decimals (int): Number of decimal places used for normalization.
        epsilon (float): Tolerance used by `is_equal`, `is_greater_than` and `is_less_than`.
    """

    DEFAULT_DECIMALS = 2
    DEFAULT_EPSILON = 0.00001
    DEFAULT_LOCALE = "en_US"

    __slots__ = ("_value", "_decimals", "_epsilon", "_currency_formatter")

    def __init__(
        self,
        value: FloatLike = 0.0,
        decimals: int = DEFAULT_DECIMALS,
        epsilon: float = DEFAULT_EPSILON,
        currency_formatter: CurrencyFormatter | None = None,
    ):
        """Initialize DecimalValue with value, decimal places and comparison tolerance.

        Args:
            value: Numeric value. NaN and infinities are accepted and propagate.
            decimals: Number of decimal places (>= 0).
            epsilon: Positive tolerance for comparisons.
            currency_formatter: Formatter used by `get_value` in currency mode. When None,
                the package default (Babel based) is used.

        Raises:
            TypeError: If $value is not a real number.
            InvalidArgumentError: If $decimals is negative or $epsilon is not positive.
        """
        # Raise: value must be a real number
        if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
            raise TypeError(f"$value must be a real number, but provided value is: {value!r}")

        # Raise: epsilon must be a positive finite number
        if isinstance(epsilon, bool) or not isinstance(epsilon, (int, float)) or not math.isfinite(epsilon) or epsilon <= 0:
            raise InvalidArgumentError("epsilon", epsilon, f"$epsilon must be a positive number, but provided value is: {epsilon!r}")

        self._check_decimals(decimals)

        self._decimals = decimals
        self._epsilon = float(epsilon)
        self._currency_formatter = currency_formatter if currency_formatter is not None else get_default_currency_formatter()
        self._value = self.exact(float(value))

    @property
    def value(self) -> float:
        """Get the normalized value."""
        return self._value

    @property
    def decimals(self) -> int:
        """Get the number of decimal places."""
        return self._decimals

    @property
    def epsilon(self) -> float:
        """Get the comparison tolerance."""
        return self._epsilon

    @property
    def currency_formatter(self) -> CurrencyFormatter:
        """Get the formatter used in currency mode."""
        return self._currency_formatter

    def get_value(self, currency_code: str = "", locale: str = DEFAULT_LOCALE, remove_prefix: bool = False) -> float | str:
        """Return the normalized value, or render it as localized currency text.

        Args:
            currency_code: ISO currency code (e.g. "USD", "EUR"). When empty, the plain float
                is returned.
            locale: Locale identifier (e.g. "en_US", "de_DE"). Required in currency mode.
            remove_prefix: Remove the currency symbol from the formatted text.

        Returns:
            The normalized float, or the formatted currency string stripped of surrounding
            whitespace.

        Raises:
            InvalidArgumentError: If $currency_code is given and $locale is empty.
        """
        if not currency_code:
            return self.exact(self._value)

        # Raise: locale is required in currency mode
        if not locale:
            raise InvalidArgumentError("locale", locale, f"Cannot call `get_value` because $locale is required when $currency_code ('{currency_code}') is provided")

        formatted = self._currency_formatter.format(self.exact(self._value), currency_code, locale)

        if remove_prefix:
            symbol = self._currency_formatter.symbol_for(currency_code, locale)
            if symbol:
                formatted = formatted.replace(symbol, "")
            logger.debug(f"Removed currency symbol '{symbol}' for $currency_code '{currency_code}', result: '{formatted}'")

        return formatted.strip()

    def set_decimals(self, decimals: int) -> None:
        """Set the number of decimal places.

        The stored value is NOT re-normalized: `DecimalValue(1.23456, 4)` followed by
        `set_decimals(2)` still holds 1.2346 until the next mutation. The new setting
        applies to later `exact`, `get_value` and arithmetic calls.

        Raises:
            InvalidArgumentError: If $decimals is negative or not an int.
        """
        self._check_decimals(decimals)
        self._decimals = decimals

    # region Arithmetic

    def increase(self, other: DecimalValue) -> None:
        """Add $other to this value in place.

        $other is normalized with this instance's $decimals before being added.
        """
        self._check_operand(other, "increase")
        self._value = self.exact(self._value + self.exact(other.get_value()))

    def decrease(self, other: DecimalValue) -> None:
        """Subtract $other from this value in place.

        $other is normalized with this instance's $decimals before being subtracted.
        """
        self._check_operand(other, "decrease")
        self._value = self.exact(self._value - self.exact(other.get_value()))

    def times(self, other: DecimalValue) -> DecimalValue:
        """Multiply this value by $other.

        Returns:
            New DecimalValue with this instance's $decimals, $epsilon and formatter.
        """
        self._check_operand(other, "times")
        result = self._value * self.exact(other.get_value())
        return self._new(result)

    def divided_by(self, other: DecimalValue) -> DecimalValue:
        """Divide this value by $other.

        Division by a normalized zero follows IEEE-754 and never raises: the result is a
        signed infinity, or NaN for `0 / 0`.

        Returns:
            New DecimalValue with this instance's $decimals, $epsilon and formatter.
        """
        self._check_operand(other, "divided_by")
        divisor = self.exact(other.get_value())
        if divisor == 0:
            logger.debug(f"Dividing {self._value} by a normalized zero ($other = {other!r})")
        result = ieee_divide(self._value, divisor)
        return self._new(result)

    # endregion

    # region Comparison

    def is_equal(self, other: DecimalValue) -> bool:
        """Check if the absolute difference to $other is strictly below $epsilon."""
        self._check_operand(other, "is_equal")
        return abs(self._value - other.get_value()) < self._epsilon

    def is_greater_than(self, other: DecimalValue) -> bool:
        """Check if this value exceeds $other by strictly more than $epsilon."""
        self._check_operand(other, "is_greater_than")
        return (self._value - other.get_value()) > self._epsilon

    def is_less_than(self, other: DecimalValue) -> bool:
        """Check if $other exceeds this value by strictly more than $epsilon."""
        self._check_operand(other, "is_less_than")
        return (other.get_value() - self._value) > self._epsilon

    # endregion

    def exact(self, number: float, round: bool = True) -> float:
        """Normalize $number to this instance's $decimals.

        Args:
            number: The number to normalize.
            round: Round half away from zero before formatting. When False, the fixed-point
                formatting of the exact binary value decides the last digit.

        Returns:
            The number parsed back from its fixed-point text with $decimals digits.
        """
        return float(to_fixed_point(number, self._decimals, round_value=round))

    @classmethod
    def from_str(
        cls,
        value_str: str,
        decimals: int = DEFAULT_DECIMALS,
        epsilon: float = DEFAULT_EPSILON,
        currency_formatter: CurrencyFormatter | None = None,
    ) -> DecimalValue:
        """Parse DecimalValue from text like '1.005'.

        Raises:
            InvalidArgumentError: If $value_str is blank or not a number.
        """
        value_str = value_str.strip()
        if not value_str:
            raise InvalidArgumentError("value_str", value_str, "Value string with $value_str = '' cannot be empty")

        try:
            value = float(value_str)
        except ValueError as e:
            raise InvalidArgumentError("value_str", value_str, f"Value string with $value_str = '{value_str}' is not a number") from e

        return cls(value, decimals, epsilon, currency_formatter)

    def _new(self, value: float) -> DecimalValue:
        return self.__class__(value, self._decimals, self._epsilon, self._currency_formatter)

    @staticmethod
    def _check_decimals(decimals: int) -> None:
        # Raise: decimals must be a non-negative int
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise InvalidArgumentError("decimals", decimals, f"$decimals must be a non-negative integer, but provided value is: {decimals!r}")

    @staticmethod
    def _check_operand(other: object, method: str) -> None:
        # Raise: operand must be a DecimalValue
        if not isinstance(other, DecimalValue):
            raise TypeError(f"Cannot call `{method}` because $other must be a DecimalValue, but provided value is: {other!r}")

    # String representations
    def __str__(self) -> str:
        """Return fixed-point text like '1.01'."""
        return to_fixed_point(self._value, self._decimals, round_value=False)

    def __repr__(self) -> str:
        """Return string like 'DecimalValue(1.01, decimals=2, epsilon=1e-05)'."""
        return f"{self.__class__.__name__}({self._value!r}, decimals={self._decimals}, epsilon={self._epsilon!r})"
