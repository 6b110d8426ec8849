"""
Plain vanilla option contracts (call and put, European or American style).
"""

import math
from dataclasses import dataclass

from bs_pricer.enums import OptionStyle, OptionType
from bs_pricer.exceptions import InvalidParameterError


def _check_finite(value: float, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidParameterError(f"{name} must be finite")
    return number


def _check_greater_than_zero(value: float, name: str) -> float:
    number = _check_finite(value, name)
    if number <= 0:
        raise InvalidParameterError(f"{name} must be greater than zero")
    return number


@dataclass(frozen=True)
class Contract:
    """
    Immutable parameters of a vanilla option contract.

    Attributes
    ----------
    option_type : OptionType
        Call or put ('call'/'put' strings are accepted)
    spot_price : float
        Price of the underlying asset, S (must be > 0)
    strike_price : float
        Exercise price, K (must be > 0)
    time_to_maturity : float
        Time until expiration in years, τ (must be > 0)
    volatility : float
        Annualized volatility of log returns, σ (must be > 0)
    risk_free_rate : float
        Annualized continuously compounded risk-free rate, r
    dividend_yield : float
        Continuous dividend yield, q
    style : OptionStyle
        Exercise style (default European)

    Raises
    ------
    InvalidParameterError
        If S, K, τ or σ is not greater than zero, any value is not finite,
        or the type or style is unknown
    """

    option_type: OptionType
    spot_price: float
    strike_price: float
    time_to_maturity: float
    volatility: float
    risk_free_rate: float = 0.0
    dividend_yield: float = 0.0
    style: OptionStyle = OptionStyle.EUROPEAN

    def __post_init__(self):
        try:
            option_type = OptionType(self.option_type)
            style = OptionStyle(self.style)
        except ValueError as exc:
            raise InvalidParameterError(str(exc)) from None

        # Frozen dataclass: normalised values are written through object.__setattr__
        values = {
            "option_type": option_type,
            "style": style,
            "spot_price": _check_greater_than_zero(self.spot_price, "S"),
            "strike_price": _check_greater_than_zero(self.strike_price, "K"),
            "time_to_maturity": _check_greater_than_zero(self.time_to_maturity, "T"),
            "volatility": _check_greater_than_zero(self.volatility, "sigma"),
            "risk_free_rate": _check_finite(self.risk_free_rate, "r"),
            "dividend_yield": _check_finite(self.dividend_yield, "q"),
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return (
            f"Contract({self.style.value} {self.option_type.value}, "
            f"S={self.spot_price}, K={self.strike_price}, T={self.time_to_maturity}, "
            f"sigma={self.volatility}, r={self.risk_free_rate}, q={self.dividend_yield})"
        )


def european_contract(
    option_type: OptionType | str,
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    q: float = 0.0,
) -> Contract:
    """Create a European-style contract."""
    return Contract(option_type, S, K, T, sigma, r, q, OptionStyle.EUROPEAN)


def american_contract(
    option_type: OptionType | str,
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    q: float = 0.0,
) -> Contract:
    """Create an American-style contract."""
    return Contract(option_type, S, K, T, sigma, r, q, OptionStyle.AMERICAN)
