"""
Analytics module for closed-form Black-Scholes pricing.

Provides the price and Greeks of European options with a continuous
dividend yield, without scipy dependency.
"""

from bs_pricer.analytics.black_scholes import (
    bs_d1,
    bs_d2,
    bs_delta,
    bs_gamma,
    bs_price,
    bs_rho,
    bs_theta,
    bs_vega,
    norm_cdf,
    norm_pdf,
)

__all__ = [
    "bs_d1",
    "bs_d2",
    "bs_delta",
    "bs_gamma",
    "bs_price",
    "bs_rho",
    "bs_theta",
    "bs_vega",
    "norm_cdf",
    "norm_pdf",
]
