from __future__ import annotations

import logging
import math

from babel.core import Locale, UnknownLocaleError
from babel.numbers import format_currency, get_currency_precision, get_currency_symbol, get_decimal_symbol

from float_handler.errors import InvalidArgumentError

from .protocol import CurrencyFormatter

logger = logging.getLogger(__name__)

# CLDR "nan" symbol, identical across the latn numbering system
NAN_SYMBOL = "NaN"


class BabelCurrencyFormatter(CurrencyFormatter):
    """Currency formatter backed by Babel and its CLDR locale data.

    Locale identifiers may use the POSIX form ("en_US", "de_DE") or the BCP-47 form
    ("en-US", "de-DE"). The number of fraction digits follows the currency's CLDR default
    (2 for USD, 0 for JPY, ...). Infinity renders with the locale's infinity sign ("$∞"),
    NaN with the "NaN" symbol in place of the number ("$NaN").
    """

    __slots__ = ()

    def format(self, value: float, currency_code: str, locale: str) -> str:
        """Implements: CurrencyFormatter.format

        Raises:
            InvalidArgumentError: If $locale is unknown or malformed.
        """
        parsed_locale = self._parse_locale(locale, "format")

        if math.isnan(value):
            result = self._format_nan(currency_code, parsed_locale)
        else:
            result = format_currency(value, currency_code, locale=parsed_locale)

        logger.debug(f"Formatted {value} as $currency_code '{currency_code}' in $locale '{locale}': '{result}'")
        return result

    def symbol_for(self, currency_code: str, locale: str) -> str:
        """Implements: CurrencyFormatter.symbol_for

        Raises:
            InvalidArgumentError: If $locale is unknown or malformed.
        """
        parsed_locale = self._parse_locale(locale, "symbol_for")
        return get_currency_symbol(currency_code, locale=parsed_locale)

    @staticmethod
    def _parse_locale(locale: str, method: str) -> Locale:
        try:
            sep = "-" if "-" in locale else "_"
            return Locale.parse(locale, sep=sep)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            raise InvalidArgumentError("locale", locale, f"Cannot call `{method}` because $locale ('{locale}') is not a known locale: {e}") from e

    @staticmethod
    def _format_nan(currency_code: str, locale: Locale) -> str:
        # Babel quantizes NaN into "NaN.00", so the currency pattern is applied to zero
        # and the rendered zero is swapped for the NaN symbol
        digits = get_currency_precision(currency_code)
        zero = "0" if digits == 0 else f"0{get_decimal_symbol(locale)}{'0' * digits}"
        return format_currency(0, currency_code, locale=locale).replace(zero, NAN_SYMBOL, 1)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# Shared formatter used by values created without an explicit one
_default_formatter: CurrencyFormatter = BabelCurrencyFormatter()


def get_default_currency_formatter() -> CurrencyFormatter:
    """Returns the package-wide formatter used when none is injected."""
    return _default_formatter


def set_default_currency_formatter(formatter: CurrencyFormatter) -> None:
    """Replaces the package-wide default formatter.

    Only values constructed afterwards pick up the new formatter.

    Args:
        formatter: Object implementing `CurrencyFormatter`.

    Raises:
        TypeError: If $formatter lacks `format` or `symbol_for`.
    """
    global _default_formatter

    # Raise: formatter must implement both protocol methods
    if not (callable(getattr(formatter, "format", None)) and callable(getattr(formatter, "symbol_for", None))):
        raise TypeError(f"$formatter must implement `format` and `symbol_for`, but provided value is: {formatter}")

    _default_formatter = formatter
    logger.debug(f"Default currency formatter set to {formatter!r}")
