"""
Rounding policy for displayed calculation values.

Every number shown in a derivation step passes through :func:`round_value`,
so a value displayed as the answer of one step reads exactly the same when it
is substituted into a later formula. Rounding works on decimals rather than
binary floats: a float is converted through its shortest ``repr`` and then
rounded half-up, which is the rounding a reader would do by hand.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from bs_pricer.enums import RoundingMethod
from bs_pricer.exceptions import InvalidPrecisionError

# Minimum working digits; raised for values whose rounded form needs more
_WORKING_PRECISION = 64


def check_precision(precision: int) -> int:
    """
    Validate a display precision.

    Parameters
    ----------
    precision : int
        Number of decimal places or significant figures (must be > 0)

    Returns
    -------
    int
        The validated precision

    Raises
    ------
    InvalidPrecisionError
        If precision is not a positive integer
    """
    if isinstance(precision, bool) or not isinstance(precision, int) or precision <= 0:
        raise InvalidPrecisionError(f"precision must be a positive integer, got {precision!r}")
    return precision


def to_decimal(value: int | float | Decimal | str) -> Decimal:
    """
    Convert a number or a display string to a finite Decimal.

    Parameters
    ----------
    value : int | float | Decimal | str
        Value to convert. Floats go through ``repr`` so that 0.1 becomes
        Decimal('0.1') rather than its binary expansion.

    Returns
    -------
    Decimal
        Decimal representation of value

    Raises
    ------
    ValueError
        If value is not a number or is not finite
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"not a number: {value!r}") from exc
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        result = Decimal(repr(float(value)))

    if not result.is_finite():
        raise ValueError(f"value must be finite, got {value!r}")
    return result


def _working_precision(number: Decimal, precision: int) -> int:
    # Digits left of the point plus the requested digits must fit the context
    return max(_WORKING_PRECISION, number.adjusted() + precision + 2, precision + 2)


def _quantum(exponent: int) -> Decimal:
    return Decimal(1).scaleb(exponent)


def _zero(precision: int) -> Decimal:
    # Zero shown with the same number of figures as any other value
    return Decimal(0).quantize(_quantum(1 - precision))


def _significant_exponent(adjusted: int, precision: int) -> int:
    """Exponent of the last digit kept for a value whose leading digit is 10**adjusted."""
    exponent = adjusted - precision + 1
    if adjusted >= 1 - precision:
        # Leading digit survives at `precision` decimal places: never round finer
        return max(exponent, -precision)
    return exponent


def _round_significant(value: Decimal, precision: int) -> Decimal:
    if value.is_zero():
        return _zero(precision)

    exponent = _significant_exponent(value.adjusted(), precision)
    rounded = value.quantize(_quantum(exponent), rounding=ROUND_HALF_UP)

    # Carry into a new leading digit, e.g. 9.996 -> 10.00 -> 10.0
    carried = _significant_exponent(rounded.adjusted(), precision)
    if carried > exponent:
        rounded = rounded.quantize(_quantum(carried), rounding=ROUND_HALF_UP)
        exponent = carried

    # Pad with zeros so that `precision` figures are shown, e.g. 0.066 -> 0.0660
    shown = rounded.adjusted() - precision + 1
    if shown < exponent:
        rounded = rounded.quantize(_quantum(shown))
    return rounded


def round_value(
    value: int | float | Decimal | str,
    precision: int,
    rounding_method: RoundingMethod | str = RoundingMethod.SIGNIFICANT_FIGURES,
) -> str:
    """
    Produce the canonical display string of a value.

    Parameters
    ----------
    value : int | float | Decimal | str
        Value to round; may be a previously rounded display string
    precision : int
        Number of decimal places or significant figures (must be > 0)
    rounding_method : RoundingMethod | str
        DECIMAL_PLACES or SIGNIFICANT_FIGURES

    Returns
    -------
    str
        Rounded value in plain (non-scientific) notation

    Notes
    -----
    Both methods round half-up. Decimal places keeps trailing zeros
    (0.522 at 5 places is "0.52200"). Significant figures never rounds finer
    than ``precision`` decimal places as long as the leading digit survives,
    and then shows ``precision`` significant digits of the rounded value:
    12.134 -> "12.1", 0.066123 -> "0.0660", 1234.5 -> "1230". Smaller values
    keep ``precision`` significant digits: 0.000836 -> "0.000836". Rounding a display string again returns it unchanged.

    Examples
    --------
    >>> round_value(0.066123, 3)
    '0.0660'
    >>> round_value(0.522, 5, RoundingMethod.DECIMAL_PLACES)
    '0.52200'
    """
    check_precision(precision)
    method = RoundingMethod(rounding_method)
    number = to_decimal(value)

    with localcontext() as ctx:
        ctx.prec = _working_precision(number, precision)
        if method is RoundingMethod.DECIMAL_PLACES:
            rounded = number.quantize(_quantum(-precision), rounding=ROUND_HALF_UP)
        else:
            rounded = _round_significant(number, precision)

    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return format(rounded, "f")


def format_exact(value: int | float | Decimal | str) -> str:
    """
    Display a value as entered, without rounding.

    Integral values lose their trailing ``.0`` (52.0 -> "52") and scientific
    notation is expanded (1e-05 -> "0.00001").
    """
    number = to_decimal(value)
    if number.is_zero():
        return "0"
    with localcontext() as ctx:
        ctx.prec = max(_WORKING_PRECISION, len(number.as_tuple().digits))
        return format(number.normalize(), "f")
