"""
Options package initialization.
"""

from bs_pricer.options.analytical import AnalyticalOption
from bs_pricer.options.european import EuropeanOption
from bs_pricer.options.types import CalculationConfig, CalculationModel, OptionCalculation

__all__ = [
    "AnalyticalOption",
    "CalculationConfig",
    "CalculationModel",
    "EuropeanOption",
    "OptionCalculation",
]
