"""
Enumerations shared across contracts, formulas and options.
"""

from enum import Enum


class OptionType(str, Enum):
    """Option contract type: the right to buy (call) or sell (put)."""

    CALL = "call"
    PUT = "put"


class OptionStyle(str, Enum):
    """Exercise style of an option contract."""

    EUROPEAN = "european"
    AMERICAN = "american"


class RoundingMethod(str, Enum):
    """
    Rounding convention for displayed calculation values.

    Attributes
    ----------
    DECIMAL_PLACES : str
        Fixed number of digits after the decimal point.
    SIGNIFICANT_FIGURES : str
        Fixed number of significant digits regardless of magnitude.
    """

    DECIMAL_PLACES = "decimal_places"
    SIGNIFICANT_FIGURES = "significant_figures"


class DelimiterType(str, Enum):
    """How a substituted value is wrapped when inserted into a formula."""

    NONE = "none"
    PARENTHESES = "parentheses"
    NEGATIVE_PARENTHESES = "negative_parentheses"
