"""
European option with Black-Scholes price and Greeks as worked derivations.

Every quantity is available both as a number (``delta()``) and as a
CalculationModel (``delta_calculation()``) whose steps explain how the number
is obtained, e.g. for a call price:

    d_1 = ... = 0.5365
    d_2 = ... = 0.3865
    N(d_1) = N(0.5365) = 0.7042
    N(d_2) = N(0.3865) = 0.6504
    c = S e^{-q tau} N(d_1) - K e^{-r tau} N(d_2) = ... = 5.06

Intermediate results are substituted into later steps as displayed, while
every answer, including CalculationModel.answer, is computed from unrounded
values with the functions of ``bs_pricer.analytics.black_scholes``.
"""

import logging

from bs_pricer.analytics.black_scholes import (
    bs_d1,
    bs_d2,
    bs_delta,
    bs_gamma,
    bs_price,
    bs_rho,
    bs_theta,
    bs_vega,
)
from bs_pricer.contracts.vanilla import Contract, european_contract
from bs_pricer.enums import OptionStyle, OptionType
from bs_pricer.exceptions import InvalidParameterError
from bs_pricer.formulas import latex
from bs_pricer.formulas.equation_input import EquationInput
from bs_pricer.formulas.solver import solve
from bs_pricer.options.analytical import (
    DISCOUNT_FACTOR,
    DIVIDEND_DISCOUNT_FACTOR,
    K,
    LATEX_DELTA,
    LATEX_GAMMA,
    LATEX_RHO,
    LATEX_THETA,
    LATEX_VEGA,
    Q,
    R,
    S,
    SIGMA,
    TAU,
    X,
    AnalyticalOption,
)
from bs_pricer.options.types import CalculationConfig, CalculationModel, OptionCalculation

logger = logging.getLogger(__name__)

D1 = latex.placeholder("d1")
D2 = latex.placeholder("d2")
# N(±d1), N(±d2) and N'(d1) as displayed by their own steps
N1 = latex.placeholder("N1")
N2 = latex.placeholder("N2")
NP1 = latex.placeholder("n1")

D1_FORMULA = latex.fraction(
    latex.natural_log(latex.fraction(S, K))
    + " + "
    + latex.parentheses(f"{R} - {Q} + " + latex.fraction(latex.power(SIGMA, "2"), "2"))
    + f" {X} {TAU}",
    f"{SIGMA} {X} " + latex.square_root(TAU),
)
D2_FORMULA = f"{D1} - {SIGMA} {X} " + latex.square_root(TAU)

CALL_PRICE_FORMULA = (
    f"{S} {X} {DIVIDEND_DISCOUNT_FACTOR} {X} {N1} - {K} {X} {DISCOUNT_FACTOR} {X} {N2}"
)
PUT_PRICE_FORMULA = (
    f"{K} {X} {DISCOUNT_FACTOR} {X} {N2} - {S} {X} {DIVIDEND_DISCOUNT_FACTOR} {X} {N1}"
)
CALL_DELTA_FORMULA = f"{DIVIDEND_DISCOUNT_FACTOR} {X} {N1}"
PUT_DELTA_FORMULA = f"-{DIVIDEND_DISCOUNT_FACTOR} {X} {N1}"
GAMMA_FORMULA = latex.fraction(
    f"{DIVIDEND_DISCOUNT_FACTOR} {X} {NP1}",
    f"{S} {X} {SIGMA} {X} " + latex.square_root(TAU),
)
VEGA_FORMULA = f"{S} {X} {DIVIDEND_DISCOUNT_FACTOR} {X} {NP1} {X} " + latex.square_root(TAU)
_THETA_DECAY = "-" + latex.fraction(
    f"{DIVIDEND_DISCOUNT_FACTOR} {X} {S} {X} {NP1} {X} {SIGMA}",
    f"2 {X} " + latex.square_root(TAU),
)
CALL_THETA_FORMULA = (
    _THETA_DECAY
    + f" - {R} {X} {K} {X} {DISCOUNT_FACTOR} {X} {N2}"
    + f" + {Q} {X} {S} {X} {DIVIDEND_DISCOUNT_FACTOR} {X} {N1}"
)
PUT_THETA_FORMULA = (
    _THETA_DECAY
    + f" + {R} {X} {K} {X} {DISCOUNT_FACTOR} {X} {N2}"
    + f" - {Q} {X} {S} {X} {DIVIDEND_DISCOUNT_FACTOR} {X} {N1}"
)
CALL_RHO_FORMULA = f"{K} {X} {TAU} {X} {DISCOUNT_FACTOR} {X} {N2}"
PUT_RHO_FORMULA = f"-{K} {X} {TAU} {X} {DISCOUNT_FACTOR} {X} {N2}"


class EuropeanOption(AnalyticalOption):
    """
    Vanilla European option priced with the Black-Scholes model.

    Parameters
    ----------
    option_type : OptionType | str
        'call' or 'put'
    S : float
        Spot price of the underlying (must be > 0)
    K : float
        Strike price (must be > 0)
    T : float
        Time to maturity in years (must be > 0)
    sigma : float
        Volatility (must be > 0)
    r : float, optional
        Risk-free rate, continuously compounded (default 0)
    q : float, optional
        Continuous dividend yield (default 0)
    config : CalculationConfig, optional
        Display configuration of the calculation steps

    Raises
    ------
    InvalidParameterError
        If S, K, T or sigma is not greater than zero
    """

    def __init__(
        self,
        option_type: OptionType | str,
        S: float,
        K: float,
        T: float,
        sigma: float,
        r: float = 0.0,
        q: float = 0.0,
        *,
        config: CalculationConfig | None = None,
    ):
        super().__init__(european_contract(option_type, S, K, T, sigma, r, q), config)

    @classmethod
    def from_contract(
        cls, contract: Contract, config: CalculationConfig | None = None
    ) -> "EuropeanOption":
        """Create the option from a European-style contract."""
        if contract.style is not OptionStyle.EUROPEAN:
            raise InvalidParameterError(
                f"closed-form pricing requires a European contract, got {contract.style.value}"
            )
        return cls(
            contract.option_type,
            contract.spot_price,
            contract.strike_price,
            contract.time_to_maturity,
            contract.volatility,
            contract.risk_free_rate,
            contract.dividend_yield,
            config=config,
        )

    def _args(self) -> tuple[float, float, float, float, float]:
        c = self.contract
        return c.spot_price, c.strike_price, c.risk_free_rate, c.time_to_maturity, c.volatility

    # Numeric values

    def d1(self) -> float:
        return bs_d1(*self._args(), q=self.contract.dividend_yield)

    def d2(self) -> float:
        return bs_d2(*self._args(), q=self.contract.dividend_yield)

    def price(self) -> float:
        return bs_price(*self._args(), self.option_type, q=self.contract.dividend_yield)

    def delta(self) -> float:
        return bs_delta(*self._args(), self.option_type, q=self.contract.dividend_yield)

    def gamma(self) -> float:
        return bs_gamma(*self._args(), q=self.contract.dividend_yield)

    def vega(self) -> float:
        return bs_vega(*self._args(), q=self.contract.dividend_yield)

    def theta(self) -> float:
        return bs_theta(*self._args(), self.option_type, q=self.contract.dividend_yield)

    def rho(self) -> float:
        return bs_rho(*self._args(), self.option_type, q=self.contract.dividend_yield)

    # Intermediate steps

    def d1_step(self) -> tuple[str, ...]:
        return solve(
            ["d_1", D1_FORMULA],
            self.contract_inputs(),
            self.round_intermediate_value(self.d1()),
        )

    def d2_step(self, d1: EquationInput) -> tuple[str, ...]:
        return solve(
            ["d_2", D2_FORMULA],
            [*self.contract_inputs(), d1],
            self.round_intermediate_value(self.d2()),
        )

    def _d1_input(self, step: tuple[str, ...]) -> EquationInput:
        return self.step_input("d1", "d_1", step)

    def _d2_input(self, step: tuple[str, ...]) -> EquationInput:
        return self.step_input("d2", "d_2", step)

    def _cdf_term(self, name: str, d: EquationInput, value: float) -> tuple[tuple[str, ...], EquationInput]:
        # N(d) for a call, N(-d) for a put
        negate = not self.is_call
        step = self.standard_normal_cdf_step(d, value, negate=negate)
        symbol = latex.standard_normal_cdf(("-" if negate else "") + d.symbolic_name())
        return step, self.step_input(name, symbol, step)

    def _pdf_term(self, d1: EquationInput) -> tuple[tuple[str, ...], EquationInput]:
        step = self.standard_normal_pdf_step(d1, self.d1())
        symbol = latex.standard_normal_pdf(d1.symbolic_name())
        return step, self.step_input("n1", symbol, step)

    def _final_step(
        self, notation: str, formula: str, terms: list[EquationInput], answer: float
    ) -> tuple[str, ...]:
        return solve(
            [notation, formula],
            [*self.contract_inputs(), *terms],
            self.round_step_value(answer),
        )

    def _model(self, quantity: str, steps: list[tuple[str, ...]], answer: float) -> CalculationModel:
        model = CalculationModel(steps=tuple(steps), answer=answer)
        logger.debug(
            "Built %s calculation for %r: %d steps, answer %s",
            quantity,
            self.contract,
            len(model.steps),
            model.rounded_answer,
        )
        return model

    # Calculations

    def price_calculation(self) -> CalculationModel:
        """
        Worked calculation of the option price.

        Steps: d1, d2, N(±d1), N(±d2), price.
        """
        d1_step = self.d1_step()
        d1 = self._d1_input(d1_step)
        d2_step = self.d2_step(d1)
        d2 = self._d2_input(d2_step)
        n1_step, n1 = self._cdf_term("N1", d1, self.d1())
        n2_step, n2 = self._cdf_term("N2", d2, self.d2())

        answer = self.price()
        if self.is_call:
            final = self._final_step("c", CALL_PRICE_FORMULA, [n1, n2], answer)
        else:
            final = self._final_step("p", PUT_PRICE_FORMULA, [n1, n2], answer)
        return self._model("price", [d1_step, d2_step, n1_step, n2_step, final], answer)

    def delta_calculation(self) -> CalculationModel:
        """
        Worked calculation of delta.

        Steps: d1, N(±d1), delta.
        """
        d1_step = self.d1_step()
        d1 = self._d1_input(d1_step)
        n1_step, n1 = self._cdf_term("N1", d1, self.d1())

        answer = self.delta()
        formula = CALL_DELTA_FORMULA if self.is_call else PUT_DELTA_FORMULA
        final = self._final_step(LATEX_DELTA, formula, [n1], answer)
        return self._model("delta", [d1_step, n1_step, final], answer)

    def gamma_calculation(self) -> CalculationModel:
        """
        Worked calculation of gamma (same for calls and puts).

        Steps: d1, N'(d1), gamma.
        """
        d1_step = self.d1_step()
        d1 = self._d1_input(d1_step)
        np1_step, np1 = self._pdf_term(d1)

        answer = self.gamma()
        final = self._final_step(LATEX_GAMMA, GAMMA_FORMULA, [np1], answer)
        return self._model("gamma", [d1_step, np1_step, final], answer)

    def vega_calculation(self) -> CalculationModel:
        """
        Worked calculation of vega (same for calls and puts).

        Steps: d1, N'(d1), vega.
        """
        d1_step = self.d1_step()
        d1 = self._d1_input(d1_step)
        np1_step, np1 = self._pdf_term(d1)

        answer = self.vega()
        final = self._final_step(LATEX_VEGA, VEGA_FORMULA, [np1], answer)
        return self._model("vega", [d1_step, np1_step, final], answer)

    def theta_calculation(self) -> CalculationModel:
        """
        Worked calculation of theta, per year.

        Steps: d1, d2, N'(d1), N(±d1), N(±d2), theta.
        """
        d1_step = self.d1_step()
        d1 = self._d1_input(d1_step)
        d2_step = self.d2_step(d1)
        d2 = self._d2_input(d2_step)
        np1_step, np1 = self._pdf_term(d1)
        n1_step, n1 = self._cdf_term("N1", d1, self.d1())
        n2_step, n2 = self._cdf_term("N2", d2, self.d2())

        answer = self.theta()
        formula = CALL_THETA_FORMULA if self.is_call else PUT_THETA_FORMULA
        final = self._final_step(LATEX_THETA, formula, [np1, n1, n2], answer)
        return self._model(
            "theta", [d1_step, d2_step, np1_step, n1_step, n2_step, final], answer
        )

    def rho_calculation(self) -> CalculationModel:
        """
        Worked calculation of rho.

        Steps: d1, d2, N(±d2), rho.
        """
        d1_step = self.d1_step()
        d1 = self._d1_input(d1_step)
        d2_step = self.d2_step(d1)
        d2 = self._d2_input(d2_step)
        n2_step, n2 = self._cdf_term("N2", d2, self.d2())

        answer = self.rho()
        formula = CALL_RHO_FORMULA if self.is_call else PUT_RHO_FORMULA
        final = self._final_step(LATEX_RHO, formula, [n2], answer)
        return self._model("rho", [d1_step, d2_step, n2_step, final], answer)

    def calculation(self) -> OptionCalculation:
        """Worked calculations of the price and all five Greeks."""
        return OptionCalculation(
            price=self.price_calculation(),
            delta=self.delta_calculation(),
            gamma=self.gamma_calculation(),
            vega=self.vega_calculation(),
            theta=self.theta_calculation(),
            rho=self.rho_calculation(),
        )
