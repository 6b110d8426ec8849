#!/usr/bin/env python
"""
Worked Black-Scholes examples from Hull, Options, Futures, and Other Derivatives.

Prints every calculation step (formula, substituted formula, result) of the
price and the Greeks.
"""

import sys
from pathlib import Path

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bs_pricer.enums import RoundingMethod
from bs_pricer.options.european import EuropeanOption
from bs_pricer.options.types import CalculationConfig, CalculationModel


def print_calculation(title: str, calculation: CalculationModel):
    """Print the steps of one calculation."""
    print(f"\n{title}")
    print("-" * 80)
    for step in calculation.steps:
        print("  " + " = ".join(step))
    print(f"  answer (unrounded): {calculation.answer:.10f}")


def demo_price():
    """Call and put price, S=52, K=50, T=0.25, sigma=0.3, r=0.12."""
    print("=" * 80)
    print("DEMO 1: European option price")
    print("=" * 80)

    for option_type in ["call", "put"]:
        option = EuropeanOption(option_type, 52, 50, 0.25, 0.3, 0.12)
        print_calculation(f"{option_type} price", option.price_calculation())


def demo_greeks():
    """Greeks of a call, S=49, K=50, T=0.3846, sigma=0.2, r=0.05."""
    print("\n" + "=" * 80)
    print("DEMO 2: Greeks")
    print("=" * 80)

    option = EuropeanOption("call", 49, 50, 0.3846, 0.2, 0.05)
    calculation = option.calculation()
    print_calculation("delta", calculation.delta)
    print_calculation("gamma", calculation.gamma)
    print_calculation("vega", calculation.vega)
    print_calculation("theta", calculation.theta)
    print_calculation("rho", calculation.rho)


def demo_precision():
    """Same delta shown with different rounding configurations."""
    print("\n" + "=" * 80)
    print("DEMO 3: Display precision")
    print("=" * 80)

    configs = [
        ("3 significant figures (default)", CalculationConfig()),
        ("6 decimal places everywhere", CalculationConfig.uniform(6, RoundingMethod.DECIMAL_PLACES)),
        ("2 significant figures everywhere", CalculationConfig.uniform(2)),
    ]
    for title, config in configs:
        option = EuropeanOption("put", 90, 87, 0.5, 0.25, 0.09, 0.03, config=config)
        print_calculation(title, option.delta_calculation())


def demo_latex():
    """LaTeX rendering of a calculation."""
    print("\n" + "=" * 80)
    print("DEMO 4: LaTeX")
    print("=" * 80)

    option = EuropeanOption("call", 42, 40, 0.5, 0.2, 0.1)
    print(option.price_calculation().to_latex())


if __name__ == "__main__":
    demo_price()
    demo_greeks()
    demo_precision()
    demo_latex()
