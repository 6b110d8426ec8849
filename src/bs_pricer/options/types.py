"""
Configuration and result types for analytical option calculations.
"""

from dataclasses import dataclass
from typing import Any

from bs_pricer.enums import RoundingMethod
from bs_pricer.formulas.rounding import check_precision


@dataclass(frozen=True)
class CalculationConfig:
    """
    Display configuration of the calculation steps of an option.

    Attributes
    ----------
    precision : int
        Precision of every step unless overridden (default 3)
    rounding_method : RoundingMethod
        Rounding of every step unless overridden (default significant figures)
    intermediate_precision : int | None
        Precision of the intermediate steps (d1, d2, N(d), N'(d)); None
        applies `precision` to them as well (default 4)
    intermediate_rounding_method : RoundingMethod
        Rounding of the intermediate steps (default decimal places)
    """

    precision: int = 3
    rounding_method: RoundingMethod = RoundingMethod.SIGNIFICANT_FIGURES
    intermediate_precision: int | None = 4
    intermediate_rounding_method: RoundingMethod = RoundingMethod.DECIMAL_PLACES

    def __post_init__(self):
        check_precision(self.precision)
        if self.intermediate_precision is not None:
            check_precision(self.intermediate_precision)
        object.__setattr__(self, "rounding_method", RoundingMethod(self.rounding_method))
        object.__setattr__(
            self, "intermediate_rounding_method", RoundingMethod(self.intermediate_rounding_method)
        )

    @classmethod
    def uniform(
        cls,
        precision: int,
        rounding_method: RoundingMethod | str = RoundingMethod.SIGNIFICANT_FIGURES,
    ) -> "CalculationConfig":
        """Same precision and rounding for every step."""
        return cls(
            precision=precision,
            rounding_method=rounding_method,
            intermediate_precision=None,
            intermediate_rounding_method=rounding_method,
        )

    @property
    def step(self) -> tuple[int, RoundingMethod]:
        return self.precision, self.rounding_method

    @property
    def intermediate(self) -> tuple[int, RoundingMethod]:
        if self.intermediate_precision is None:
            return self.step
        return self.intermediate_precision, self.intermediate_rounding_method


@dataclass(frozen=True)
class CalculationModel:
    """
    Ordered derivation steps of one quantity and its numeric answer.

    Attributes
    ----------
    steps : tuple[tuple[str, ...], ...]
        Calculation steps; each step is (formulas..., substituted formulas...,
        rounded answer)
    answer : float
        Unrounded answer, equal to the closed-form value of the quantity
    """

    steps: tuple[tuple[str, ...], ...]
    answer: float

    def __post_init__(self):
        steps = tuple(tuple(step) for step in self.steps)
        if not steps:
            raise ValueError("a calculation needs at least one step")
        for step in steps:
            if len(step) < 2:
                raise ValueError(f"a calculation step needs at least 2 parts, got {step!r}")
        object.__setattr__(self, "steps", steps)

    @property
    def final_step(self) -> tuple[str, ...]:
        return self.steps[-1]

    @property
    def rounded_answer(self) -> str:
        """Displayed answer of the final step."""
        return self.steps[-1][-1]

    def to_latex(self) -> str:
        """
        Render the derivation as a LaTeX aligned block.

        Each step becomes one line, ``first &= second = ... = answer``.
        """
        lines = [step[0] + " &= " + " = ".join(step[1:]) for step in self.steps]
        return "\\begin{aligned}\n" + " \\\\\n".join(lines) + "\n\\end{aligned}"

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "answer": self.answer,
            "rounded_answer": self.rounded_answer,
            "steps": [list(step) for step in self.steps],
        }

    def __repr__(self) -> str:
        return (
            f"CalculationModel(\n"
            f"  answer={self.answer:.6f},\n"
            f"  rounded_answer={self.rounded_answer},\n"
            f"  n_steps={len(self.steps)}\n"
            f")"
        )


@dataclass(frozen=True)
class OptionCalculation:
    """Calculations of the price and the five Greeks of one option."""

    price: CalculationModel
    delta: CalculationModel
    gamma: CalculationModel
    vega: CalculationModel
    theta: CalculationModel
    rho: CalculationModel

    def answers(self) -> dict[str, float]:
        return {name: model.answer for name, model in self._models().items()}

    def to_dict(self) -> dict[str, Any]:
        """Convert results to dictionary for JSON serialization."""
        return {name: model.to_dict() for name, model in self._models().items()}

    def _models(self) -> dict[str, CalculationModel]:
        return {
            "price": self.price,
            "delta": self.delta,
            "gamma": self.gamma,
            "vega": self.vega,
            "theta": self.theta,
            "rho": self.rho,
        }

    def __repr__(self) -> str:
        lines = ["OptionCalculation("]
        for name, model in self._models().items():
            lines.append(f"  {name}={model.answer:.6f} [{model.rounded_answer}]")
        lines.append(")")
        return "\n".join(lines)
