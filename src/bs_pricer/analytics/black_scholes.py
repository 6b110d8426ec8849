"""
Black-Scholes analytical pricing formulas for European options.

This module provides closed-form Black-Scholes prices and Greeks with a
continuous dividend yield, without scipy dependency. Inputs are assumed to be
validated upstream (S0, K, T, sigma > 0); r and q may take any sign.
"""

import math

from bs_pricer.enums import OptionType


def norm_cdf(x: float) -> float:
    """
    Cumulative distribution function for standard normal distribution.

    Uses math.erf for calculation without scipy dependency.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        CDF value at x: P(Z <= x) where Z ~ N(0,1)
    """
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def norm_pdf(x: float) -> float:
    """
    Probability density function for standard normal distribution.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        PDF value at x: φ(x) = exp(-x²/2)/√(2π)
    """
    return math.exp(-0.5 * x**2) / math.sqrt(2.0 * math.pi)


def option_type_of(option_type: OptionType | str) -> OptionType:
    """Coerce 'call'/'put' to an OptionType."""
    try:
        return OptionType(option_type)
    except ValueError:
        raise ValueError("option_type must be 'call' or 'put'") from None


def bs_d1(S0: float, K: float, r: float, T: float, sigma: float, q: float = 0.0) -> float:
    """
    Standardized term d1 of the Black-Scholes formula.

    d1 = [ln(S/K) + (r - q + σ²/2)T] / (σ√T)
    """
    return (math.log(S0 / K) + (r - q + 0.5 * sigma**2) * T) / (sigma * math.sqrt(T))


def bs_d2(S0: float, K: float, r: float, T: float, sigma: float, q: float = 0.0) -> float:
    """
    Standardized term d2 of the Black-Scholes formula.

    d2 = d1 - σ√T
    """
    return bs_d1(S0, K, r, T, sigma, q) - sigma * math.sqrt(T)


def bs_price(
    S0: float,
    K: float,
    r: float,
    T: float,
    sigma: float,
    option_type: OptionType | str,
    q: float = 0.0,
) -> float:
    """
    Compute European option price using Black-Scholes formula.

    Parameters
    ----------
    S0 : float
        Spot price of the underlying (must be > 0)
    K : float
        Strike price (must be > 0)
    r : float
        Risk-free interest rate (annualized, continuously compounded)
    T : float
        Time to maturity in years (must be > 0)
    sigma : float
        Volatility (annualized, must be > 0)
    option_type : OptionType | str
        'call' or 'put'
    q : float, optional
        Continuous dividend yield (default 0)

    Returns
    -------
    float
        Option price

    Notes
    -----
    Call: S e^(-qT) N(d1) - K e^(-rT) N(d2)
    Put:  K e^(-rT) N(-d2) - S e^(-qT) N(-d1)
    """
    kind = option_type_of(option_type)
    d1 = bs_d1(S0, K, r, T, sigma, q)
    d2 = bs_d2(S0, K, r, T, sigma, q)
    spot_factor = S0 * math.exp(-q * T)
    strike_factor = K * math.exp(-r * T)

    if kind is OptionType.CALL:
        return spot_factor * norm_cdf(d1) - strike_factor * norm_cdf(d2)
    return strike_factor * norm_cdf(-d2) - spot_factor * norm_cdf(-d1)


def bs_delta(
    S0: float,
    K: float,
    r: float,
    T: float,
    sigma: float,
    option_type: OptionType | str,
    q: float = 0.0,
) -> float:
    """
    Compute Delta for European option using Black-Scholes formula.

    Delta = ∂V/∂S

    Notes
    -----
    - Call delta: e^(-qT) N(d1)
    - Put delta: -e^(-qT) N(-d1)
    """
    kind = option_type_of(option_type)
    d1 = bs_d1(S0, K, r, T, sigma, q)

    if kind is OptionType.CALL:
        return math.exp(-q * T) * norm_cdf(d1)
    return -math.exp(-q * T) * norm_cdf(-d1)


def bs_gamma(S0: float, K: float, r: float, T: float, sigma: float, q: float = 0.0) -> float:
    """
    Compute Gamma for European option using Black-Scholes formula.

    Gamma = ∂²V/∂S² (same for calls and puts)

    Notes
    -----
    Gamma = e^(-qT) φ(d1) / (S σ √T)
    """
    d1 = bs_d1(S0, K, r, T, sigma, q)
    return math.exp(-q * T) * norm_pdf(d1) / (S0 * sigma * math.sqrt(T))


def bs_vega(S0: float, K: float, r: float, T: float, sigma: float, q: float = 0.0) -> float:
    """
    Compute Vega for European option using Black-Scholes formula.

    Vega = ∂V/∂σ (same for calls and puts)

    Notes
    -----
    Vega = S e^(-qT) φ(d1) √T
    """
    d1 = bs_d1(S0, K, r, T, sigma, q)
    return S0 * math.exp(-q * T) * norm_pdf(d1) * math.sqrt(T)


def bs_theta(
    S0: float,
    K: float,
    r: float,
    T: float,
    sigma: float,
    option_type: OptionType | str,
    q: float = 0.0,
) -> float:
    """
    Compute Theta for European option using Black-Scholes formula.

    Theta = -∂V/∂T, per year

    Notes
    -----
    For call: -e^(-qT) S φ(d1) σ/(2√T) - r K e^(-rT) N(d2) + q S e^(-qT) N(d1)
    For put:  -e^(-qT) S φ(d1) σ/(2√T) + r K e^(-rT) N(-d2) - q S e^(-qT) N(-d1)
    """
    kind = option_type_of(option_type)
    d1 = bs_d1(S0, K, r, T, sigma, q)
    d2 = bs_d2(S0, K, r, T, sigma, q)

    term1 = -math.exp(-q * T) * (S0 * norm_pdf(d1) * sigma) / (2 * math.sqrt(T))

    if kind is OptionType.CALL:
        term2 = r * K * math.exp(-r * T) * norm_cdf(d2)
        term3 = q * S0 * math.exp(-q * T) * norm_cdf(d1)
        return term1 - term2 + term3

    term2 = r * K * math.exp(-r * T) * norm_cdf(-d2)
    term3 = q * S0 * math.exp(-q * T) * norm_cdf(-d1)
    return term1 + term2 - term3


def bs_rho(
    S0: float,
    K: float,
    r: float,
    T: float,
    sigma: float,
    option_type: OptionType | str,
    q: float = 0.0,
) -> float:
    """
    Compute Rho for European option using Black-Scholes formula.

    Rho = ∂V/∂r

    Notes
    -----
    For call: K T e^(-rT) N(d2)
    For put: -K T e^(-rT) N(-d2)
    """
    kind = option_type_of(option_type)
    d2 = bs_d2(S0, K, r, T, sigma, q)

    if kind is OptionType.CALL:
        return K * T * math.exp(-r * T) * norm_cdf(d2)
    return -K * T * math.exp(-r * T) * norm_cdf(-d2)
