"""
Black-Scholes Option Pricing with Worked Derivations

Closed-form prices and Greeks of European options, each explained as a
sequence of formula, substituted formula and rounded result.
"""

from bs_pricer._version import __version__

# Analytics
from bs_pricer.analytics.black_scholes import (
    bs_delta,
    bs_gamma,
    bs_price,
    bs_rho,
    bs_theta,
    bs_vega,
)

# Contracts
from bs_pricer.contracts.vanilla import Contract, american_contract, european_contract
from bs_pricer.enums import DelimiterType, OptionStyle, OptionType, RoundingMethod
from bs_pricer.exceptions import (
    InvalidParameterError,
    InvalidPrecisionError,
    OptionPricingError,
    UnresolvedVariableError,
)

# Formulas
from bs_pricer.formulas.equation_input import EquationInput, equation_input
from bs_pricer.formulas.rounding import round_value
from bs_pricer.formulas.solver import solve

# Options
from bs_pricer.options.european import EuropeanOption
from bs_pricer.options.types import CalculationConfig, CalculationModel, OptionCalculation

__all__ = [
    # Version
    "__version__",
    # Enums
    "DelimiterType",
    "OptionStyle",
    "OptionType",
    "RoundingMethod",
    # Errors
    "InvalidParameterError",
    "InvalidPrecisionError",
    "OptionPricingError",
    "UnresolvedVariableError",
    # Contracts
    "Contract",
    "american_contract",
    "european_contract",
    # Formulas
    "EquationInput",
    "equation_input",
    "round_value",
    "solve",
    # Options
    "CalculationConfig",
    "CalculationModel",
    "EuropeanOption",
    "OptionCalculation",
    # Analytics
    "bs_price",
    "bs_delta",
    "bs_gamma",
    "bs_vega",
    "bs_theta",
    "bs_rho",
]
