"""
Formula templating, rounding and step assembly.
"""

from bs_pricer.formulas.equation_input import EquationInput, equation_input
from bs_pricer.formulas.rounding import format_exact, round_value
from bs_pricer.formulas.solver import solve, variables

__all__ = [
    "EquationInput",
    "equation_input",
    "format_exact",
    "round_value",
    "solve",
    "variables",
]
