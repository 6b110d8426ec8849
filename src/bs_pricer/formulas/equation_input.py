"""
Equation inputs: the variables substituted into formula templates.
"""

from dataclasses import dataclass

from bs_pricer.enums import DelimiterType, RoundingMethod
from bs_pricer.formulas import latex
from bs_pricer.formulas.rounding import check_precision, format_exact, round_value, to_decimal

DEFAULT_PRECISION = 3
DEFAULT_ROUNDING_METHOD = RoundingMethod.SIGNIFICANT_FIGURES


@dataclass(frozen=True)
class EquationInput:
    """
    A named variable of a formula together with its display configuration.

    Attributes
    ----------
    name : str
        Placeholder identifier used in templates (``${name}``)
    value : float
        Numeric value substituted into the formula
    symbol : str
        LaTeX label shown in the symbolic formula
    precision : int | None
        Display precision; None displays the value as entered
    rounding_method : RoundingMethod
        DECIMAL_PLACES or SIGNIFICANT_FIGURES
    delimiter : DelimiterType
        Whether the displayed value is wrapped in parentheses
    """

    name: str
    value: float
    symbol: str
    precision: int | None = DEFAULT_PRECISION
    rounding_method: RoundingMethod = DEFAULT_ROUNDING_METHOD
    delimiter: DelimiterType = DelimiterType.NONE

    def symbolic_name(self) -> str:
        return self.symbol

    def raw_value(self) -> float:
        return self.value

    def display_value(self) -> str:
        """
        Value as it appears in a substituted formula.

        Returns
        -------
        str
            Rounded value, wrapped in parentheses when the delimiter asks for
            it (always, or only for a negative value)
        """
        if self.precision is None:
            text = format_exact(self.value)
        else:
            text = round_value(self.value, self.precision, self.rounding_method)

        if self.delimiter is DelimiterType.PARENTHESES:
            return latex.parentheses(text)
        if self.delimiter is DelimiterType.NEGATIVE_PARENTHESES and text.startswith("-"):
            return latex.parentheses(text)
        return text


def equation_input(
    name: str,
    value,
    *,
    symbol: str | None = None,
    precision: int | None = DEFAULT_PRECISION,
    rounding_method: RoundingMethod | str = DEFAULT_ROUNDING_METHOD,
    delimiter: DelimiterType | str = DelimiterType.NONE,
) -> EquationInput:
    """
    Build a validated EquationInput.

    Parameters
    ----------
    name : str
        Placeholder identifier (ASCII letters, digits and underscores)
    value : int | float | Decimal | str
        Numeric value; a display string from an earlier step is accepted
    symbol : str, optional
        LaTeX label (defaults to name)
    precision : int | None, optional
        Display precision (default 3); None displays the value as entered
    rounding_method : RoundingMethod | str, optional
        Rounding convention (default significant figures)
    delimiter : DelimiterType | str, optional
        Parenthesis directive for the displayed value

    Returns
    -------
    EquationInput
        Immutable input

    Raises
    ------
    ValueError
        If name is not a valid identifier, is reserved, or value is not finite
    InvalidPrecisionError
        If precision is not a positive integer
    """
    if not (isinstance(name, str) and name.isascii() and name.isidentifier()):
        raise ValueError(f"input name must be an identifier, got {name!r}")
    if name == latex.TIMES_NAME:
        raise ValueError(f"input name '{name}' is reserved")
    if precision is not None:
        check_precision(precision)

    return EquationInput(
        name=name,
        value=float(to_decimal(value)),
        symbol=name if symbol is None else symbol,
        precision=precision,
        rounding_method=RoundingMethod(rounding_method),
        delimiter=DelimiterType(delimiter),
    )
