__version__ = "0.1.0"

from float_handler.domain.decimal_value import DecimalValue
from float_handler.errors import FloatHandlerError, InvalidArgumentError
from float_handler.formatting.protocol import CurrencyFormatter
from float_handler.formatting.babel_formatter import BabelCurrencyFormatter

__all__ = [
    "DecimalValue",
    "CurrencyFormatter",
    "BabelCurrencyFormatter",
    "FloatHandlerError",
    "InvalidArgumentError",
]
