"""
Tests for the closed-form Black-Scholes kernel.
"""

import math

import numpy as np
import pytest

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
from bs_pricer.enums import OptionType


def random_parameters(n: int, seed: int = 42):
    """Seeded sweep of valid (S0, K, r, T, sigma, q) tuples."""
    rng = np.random.default_rng(seed)
    S0 = rng.uniform(10, 200, size=n)
    K = S0 * rng.uniform(0.7, 1.3, size=n)
    r = rng.uniform(-0.02, 0.12, size=n)
    T = rng.uniform(0.05, 3.0, size=n)
    sigma = rng.uniform(0.05, 0.8, size=n)
    q = rng.uniform(-0.01, 0.06, size=n)
    return [tuple(float(x) for x in row) for row in zip(S0, K, r, T, sigma, q)]


class TestStandardNormal:
    """Test the standard normal primitive."""

    def test_cdf_values(self):
        """Test known CDF values."""
        assert norm_cdf(0.0) == 0.5
        assert abs(norm_cdf(1.96) - 0.9750021) < 1e-7
        assert abs(norm_cdf(-1.0) - 0.1586553) < 1e-7

    def test_cdf_symmetry(self):
        """Test N(x) + N(-x) = 1."""
        for x in [0.1, 0.5365, 1.0, 2.5]:
            assert abs(norm_cdf(x) + norm_cdf(-x) - 1.0) < 1e-15

    def test_pdf_values(self):
        """Test the density at 0 and its symmetry."""
        assert abs(norm_pdf(0.0) - 1.0 / math.sqrt(2.0 * math.pi)) < 1e-15
        assert norm_pdf(0.7) == norm_pdf(-0.7)


class TestHullExamples:
    """Test against worked examples from Hull, Options, Futures, and Other Derivatives."""

    def test_d_terms_example_15_6(self):
        """Test d1 and d2 (Hull Example 15.6: d1 = 0.7693, d2 = 0.6278)."""
        assert abs(bs_d1(42, 40, 0.1, 0.5, 0.2) - 0.7693) < 1e-4
        assert abs(bs_d2(42, 40, 0.1, 0.5, 0.2) - 0.6278) < 1e-4

    def test_price_example_15_6(self):
        """Test call and put price (Hull Example 15.6)."""
        assert abs(bs_price(42, 40, 0.1, 0.5, 0.2, "call") - 4.76) < 0.01
        assert abs(bs_price(42, 40, 0.1, 0.5, 0.2, "put") - 0.81) < 0.01

    def test_price_problem_15_13(self):
        """Test call price S=52, K=50, T=0.25, sigma=0.3, r=0.12."""
        assert abs(bs_price(52, 50, 0.12, 0.25, 0.3, OptionType.CALL) - 5.06) < 0.01

    def test_price_with_dividend_example_17_1(self):
        """Test call price on an index paying a dividend yield (Hull Example 17.1)."""
        assert abs(bs_price(930, 900, 0.08, 2 / 12, 0.2, "call", q=0.03) - 51.83) < 0.01

    def test_greeks_example_19(self):
        """Test the Greeks of Hull Examples 19.1, 19.2, 19.4, 19.6 and 19.7."""
        S0, K, r, T, sigma = 49, 50, 0.05, 0.3846, 0.2

        assert abs(bs_delta(S0, K, r, T, sigma, "call") - 0.522) < 0.001
        assert abs(bs_gamma(S0, K, r, T, sigma) - 0.066) < 0.001
        assert abs(bs_vega(S0, K, r, T, sigma) - 12.1) < 0.1
        assert abs(bs_theta(S0, K, r, T, sigma, "call") - (-4.31)) < 0.01
        assert abs(bs_rho(S0, K, r, T, sigma, "call") - 8.91) < 0.01

    def test_put_delta_example_19_9(self):
        """Test put delta with dividend yield (Hull Example 19.9)."""
        assert abs(bs_delta(90, 87, 0.09, 0.5, 0.25, "put", q=0.03) - (-0.3215)) < 0.0001


class TestProperties:
    """Test model-independent relationships."""

    @pytest.mark.parametrize("S0,K,r,T,sigma,q", random_parameters(50))
    def test_put_call_parity(self, S0, K, r, T, sigma, q):
        """Test c - p = S e^(-qT) - K e^(-rT)."""
        call = bs_price(S0, K, r, T, sigma, "call", q=q)
        put = bs_price(S0, K, r, T, sigma, "put", q=q)
        forward = S0 * math.exp(-q * T) - K * math.exp(-r * T)

        assert abs(call - put - forward) < 1e-9

    @pytest.mark.parametrize("S0,K,r,T,sigma,q", random_parameters(20, seed=7))
    def test_delta_parity(self, S0, K, r, T, sigma, q):
        """Test call delta - put delta = e^(-qT)."""
        call = bs_delta(S0, K, r, T, sigma, "call", q=q)
        put = bs_delta(S0, K, r, T, sigma, "put", q=q)

        assert abs(call - put - math.exp(-q * T)) < 1e-12

    @pytest.mark.parametrize("S0,K,r,T,sigma,q", random_parameters(20, seed=11))
    def test_greeks_match_finite_differences(self, S0, K, r, T, sigma, q):
        """Test closed-form Greeks against central differences of the price."""
        for option_type in ["call", "put"]:
            def price(S0=S0, r=r, T=T, sigma=sigma):
                return bs_price(S0, K, r, T, sigma, option_type, q=q)

            hs = 1e-3 * S0
            h = 1e-5
            fd_delta = (price(S0=S0 + hs) - price(S0=S0 - hs)) / (2 * hs)
            fd_gamma = (price(S0=S0 + hs) - 2 * price() + price(S0=S0 - hs)) / hs**2
            fd_vega = (price(sigma=sigma + h) - price(sigma=sigma - h)) / (2 * h)
            fd_theta = -(price(T=T + h) - price(T=T - h)) / (2 * h)
            fd_rho = (price(r=r + h) - price(r=r - h)) / (2 * h)

            assert np.isclose(bs_delta(S0, K, r, T, sigma, option_type, q=q), fd_delta, rtol=1e-4, atol=1e-6)
            assert np.isclose(bs_gamma(S0, K, r, T, sigma, q=q), fd_gamma, rtol=1e-3, atol=1e-6)
            assert np.isclose(bs_vega(S0, K, r, T, sigma, q=q), fd_vega, rtol=1e-4, atol=1e-6)
            assert np.isclose(bs_theta(S0, K, r, T, sigma, option_type, q=q), fd_theta, rtol=1e-4, atol=1e-6)
            assert np.isclose(bs_rho(S0, K, r, T, sigma, option_type, q=q), fd_rho, rtol=1e-4, atol=1e-6)

    def test_zero_rate_and_yield(self):
        """Test r = q = 0 is priced normally."""
        price = bs_price(100, 100, 0.0, 1.0, 0.2, "call")

        # ATM, zero rates: c = S (2 N(sigma sqrt(T) / 2) - 1)
        assert abs(price - 100 * (2 * norm_cdf(0.1) - 1)) < 1e-12


class TestOptionTypeTag:
    """Test the option type argument."""

    def test_enum_and_string_agree(self):
        """Test OptionType members and their string values are interchangeable."""
        assert bs_price(42, 40, 0.1, 0.5, 0.2, OptionType.PUT) == bs_price(42, 40, 0.1, 0.5, 0.2, "put")

    @pytest.mark.parametrize("func", [bs_price, bs_delta, bs_theta, bs_rho])
    def test_invalid_option_type(self, func):
        """Test that an unknown option type raises error."""
        with pytest.raises(ValueError, match="option_type must be 'call' or 'put'"):
            func(42, 40, 0.1, 0.5, 0.2, "straddle")
