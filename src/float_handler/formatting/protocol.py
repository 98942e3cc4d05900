from __future__ import annotations

from typing import Protocol


# region Interface


class CurrencyFormatter(Protocol):
    """Domain interface for rendering numbers as localized currency text.

    `DecimalValue.get_value` depends only on this interface, so the value type can be
    exercised without a live locale database.
    """

    def format(self, value: float, currency_code: str, locale: str) -> str:
        """Formats $value as a currency string for $currency_code in $locale.

        The result must be deterministic for a given ($value, $currency_code, $locale) triple.

        Args:
            value: Already normalized number to render.
            currency_code: ISO 4217 currency code (e.g. "USD", "EUR").
            locale: Locale identifier, POSIX ("en_US") or BCP-47 ("en-US").

        Returns:
            Localized currency text, e.g. "$1,234.50" or "1.234,50 €".
        """
        ...

    def symbol_for(self, currency_code: str, locale: str) -> str:
        """Returns the standalone currency symbol that `format` emits for $currency_code in $locale.

        Args:
            currency_code: ISO 4217 currency code.
            locale: Locale identifier.

        Returns:
            The symbol token, e.g. "$" or "€".
        """
        ...


# endregion
