"""
Base class for options with an analytical (closed-form) solution.

Holds the contract and the display configuration, and builds the pieces
shared by every closed-form derivation: the contract inputs, the discount
factors, and the standard normal CDF/PDF calculation steps.
"""

from dataclasses import replace

from bs_pricer.analytics.black_scholes import norm_cdf, norm_pdf
from bs_pricer.contracts.vanilla import Contract
from bs_pricer.enums import DelimiterType, OptionType
from bs_pricer.formulas import latex
from bs_pricer.formulas.equation_input import EquationInput, equation_input
from bs_pricer.formulas.rounding import round_value
from bs_pricer.formulas.solver import solve
from bs_pricer.options.types import CalculationConfig

# Contract placeholders
S = latex.placeholder("S")
K = latex.placeholder("K")
TAU = latex.placeholder("tau")
SIGMA = latex.placeholder("sigma")
R = latex.placeholder("r")
Q = latex.placeholder("q")
X = latex.TIMES

DISCOUNT_FACTOR = latex.exponential(f"-{R} {X} {TAU}")
DIVIDEND_DISCOUNT_FACTOR = latex.exponential(f"-{Q} {X} {TAU}")

LATEX_DELTA = r"\Delta"
LATEX_GAMMA = r"\Gamma"
LATEX_VEGA = r"\mathcal{V}"
LATEX_THETA = r"\Theta"
LATEX_RHO = r"\rho"


def _bare(variable: EquationInput) -> EquationInput:
    # Sole function argument: already enclosed by the function's own parentheses
    return replace(variable, delimiter=DelimiterType.NONE)


class AnalyticalOption:
    """
    Option whose price and Greeks have closed-form expressions.

    Parameters
    ----------
    contract : Contract
        Validated contract parameters
    config : CalculationConfig, optional
        Display configuration of the calculation steps (default: 3 significant
        figures, intermediate steps to 4 decimal places)
    """

    def __init__(self, contract: Contract, config: CalculationConfig | None = None):
        self.contract = contract
        self.config = config if config is not None else CalculationConfig()

    @property
    def option_type(self) -> OptionType:
        return self.contract.option_type

    @property
    def is_call(self) -> bool:
        return self.contract.option_type is OptionType.CALL

    # Standard normal distribution

    def standard_normal_cdf(self, x: float) -> float:
        """Standard normal cumulative distribution function, N(x)."""
        return norm_cdf(x)

    def standard_normal_pdf(self, x: float) -> float:
        """Standard normal probability density function, N'(x)."""
        return norm_pdf(x)

    def standard_normal_cdf_step(
        self,
        variable: EquationInput,
        value: float | None = None,
        negate: bool = False,
    ) -> tuple[str, ...]:
        """
        Calculation step of the standard normal CDF.

        Parameters
        ----------
        variable : EquationInput
            Argument as displayed in the substituted formula
        value : float, optional
            Unrounded argument used for the answer (defaults to the input's value)
        negate : bool, optional
            Evaluate N(-x) instead of N(x)

        Returns
        -------
        tuple[str, ...]
            (function notation, function with the value substituted, result)
        """
        x = variable.raw_value() if value is None else value
        sign = "-" if negate else ""
        if not negate:
            variable = _bare(variable)
        formula = latex.standard_normal_cdf(sign + latex.placeholder(variable.name))
        answer = self.standard_normal_cdf(-x if negate else x)
        return solve([formula], [variable], self.round_intermediate_value(answer))

    def standard_normal_pdf_step(
        self,
        variable: EquationInput,
        value: float | None = None,
    ) -> tuple[str, ...]:
        """
        Calculation step of the standard normal PDF.

        Returns
        -------
        tuple[str, ...]
            (function notation, function with the value substituted, result)
        """
        x = variable.raw_value() if value is None else value
        variable = _bare(variable)
        formula = latex.standard_normal_pdf(latex.placeholder(variable.name))
        answer = self.standard_normal_pdf(x)
        return solve([formula], [variable], self.round_intermediate_value(answer))

    # Inputs and rounding

    def contract_inputs(self) -> list[EquationInput]:
        """Contract parameters as equation inputs, displayed as entered."""
        contract = self.contract
        values = [
            ("S", "S", contract.spot_price),
            ("K", "K", contract.strike_price),
            ("tau", r"\tau", contract.time_to_maturity),
            ("sigma", r"\sigma", contract.volatility),
            ("r", "r", contract.risk_free_rate),
            ("q", "q", contract.dividend_yield),
        ]
        return [
            equation_input(
                name,
                value,
                symbol=symbol,
                precision=None,
                delimiter=DelimiterType.NEGATIVE_PARENTHESES,
            )
            for name, symbol, value in values
        ]

    def step_input(self, name: str, symbol: str, step: tuple[str, ...]) -> EquationInput:
        """
        Feed the rounded answer of an intermediate step into a later formula.

        The input keeps the intermediate precision, so the literal substituted
        later reads exactly as the answer of `step`.
        """
        precision, rounding_method = self.config.intermediate
        return equation_input(
            name,
            step[-1],
            symbol=symbol,
            precision=precision,
            rounding_method=rounding_method,
            delimiter=DelimiterType.NEGATIVE_PARENTHESES,
        )

    def round_step_value(self, value: float) -> str:
        precision, rounding_method = self.config.step
        return round_value(value, precision, rounding_method)

    def round_intermediate_value(self, value: float) -> str:
        precision, rounding_method = self.config.intermediate
        return round_value(value, precision, rounding_method)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.contract!r})"
