from __future__ import annotations

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | Decimal

# Minimum working precision, same as the default `decimal` context
_MIN_PRECISION = 28


def as_decimal(value: FloatLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Floats are converted via their shortest `repr` text, so `1.005` becomes
    `Decimal("1.005")` and not the exact binary expansion `1.00499999...`.

    Args:
        value: Input value as `FloatLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(repr(float(value)))


def round_half_away_from_zero(value: float, decimals: int) -> Decimal:
    """Round $value to $decimals places, ties going away from zero.

    The working precision grows with the magnitude of $value, so large floats
    like `1e300` never trip `decimal.InvalidOperation` during quantization.

    Args:
        value: Finite float to round.
        decimals: Number of places after the decimal point (>= 0).

    Returns:
        Rounded value whose exponent is exactly `-decimals`.

    Examples:
        >>> round_half_away_from_zero(1.005, 2)
        Decimal('1.01')
        >>> round_half_away_from_zero(-2.5, 0)
        Decimal('-3')
    """
    decimal_value = as_decimal(value)
    precision = max(_MIN_PRECISION, decimal_value.adjusted() + decimals + 2)
    context = Context(prec=precision, rounding=ROUND_HALF_UP)
    return decimal_value.quantize(Decimal(1).scaleb(-decimals), context=context)


def to_fixed_point(value: float, decimals: int, round_value: bool = True) -> str:
    """Format $value as fixed-point text with exactly $decimals fractional digits.

    No thousands separator is used. A result that is zero never carries a sign
    (`-0.001` gives `'0.00'`, not `'-0.00'`). Non-finite values are rendered by
    `repr` (`'nan'`, `'inf'`, `'-inf'`) so that `float()` parses them back.

    Args:
        value: Number to format.
        decimals: Number of places after the decimal point (>= 0).
        round_value: If True, round half away from zero first. If False, the
            exact binary value is formatted by Python's float formatting.

    Returns:
        Fixed-point text, e.g. `'1.01'`.
    """
    if not math.isfinite(value):
        return repr(float(value))

    if round_value:
        rounded = round_half_away_from_zero(value, decimals)
        if rounded.is_zero():
            rounded = rounded.copy_abs()
        return format(rounded, "f")

    text = f"{value:.{decimals}f}"
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two floats with IEEE-754 semantics for a zero $denominator.

    Python raises `ZeroDivisionError` for `x / 0.0`; this helper returns what
    the hardware would: a signed infinity for a non-zero dividend, NaN for
    `0 / 0` or a NaN dividend.

    Examples:
        >>> ieee_divide(5.0, 0.0)
        inf
        >>> ieee_divide(5.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)
