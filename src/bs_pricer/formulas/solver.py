"""
Formula step assembler.

A formula template is a LaTeX string with ``$name`` / ``${name}`` placeholders.
Solving a step renders every template twice, once with the LaTeX symbols of
its inputs and once with their display values, and appends the rounded answer:

    ("d_2", "d_1 - \\sigma \\sqrt{\\tau}", "0.5365 - 0.3 \\times \\sqrt{0.25}", "0.3865")

Placeholders follow ``string.Template`` identifier rules, so ``$S`` can never
match inside ``$Sigma``.
"""

import logging
from collections.abc import Iterable, Sequence
from string import Template

from bs_pricer.exceptions import UnresolvedVariableError
from bs_pricer.formulas import latex
from bs_pricer.formulas.equation_input import EquationInput

logger = logging.getLogger(__name__)

_SYMBOLIC_TIMES = " "
_SUBSTITUTED_TIMES = r" \times "


def _tidy(text: str) -> str:
    return " ".join(text.split())


def _index_inputs(inputs: Iterable[EquationInput]) -> dict[str, EquationInput]:
    indexed: dict[str, EquationInput] = {}
    for item in inputs:
        if item.name in indexed:
            raise ValueError(f"duplicate equation input '{item.name}'")
        indexed[item.name] = item
    return indexed


def variables(formula: str) -> list[str]:
    """
    Names of the input placeholders referenced by a template.

    Parameters
    ----------
    formula : str
        Formula template

    Returns
    -------
    list[str]
        Placeholder names in order of first appearance, without the reserved
        multiplication placeholder
    """
    return [name for name in Template(formula).get_identifiers() if name != latex.TIMES_NAME]


def solve(
    formulas: Sequence[str] | str,
    inputs: Iterable[EquationInput],
    answer: str,
) -> tuple[str, ...]:
    """
    Assemble one calculation step.

    Parameters
    ----------
    formulas : Sequence[str] | str
        Formula templates, e.g. a notation (``d_1``) followed by its definition
    inputs : Iterable[EquationInput]
        Variables available to the templates; unused inputs are ignored
    answer : str
        Rounded answer shown as the last part of the step

    Returns
    -------
    tuple[str, ...]
        Symbolic form of every template, then the substituted form of every
        template that references at least one input, then the answer

    Raises
    ------
    UnresolvedVariableError
        If a template references a variable that has no input
    ValueError
        If no formula is given or two inputs share a name
    """
    if isinstance(formulas, str):
        formulas = [formulas]
    if not formulas:
        raise ValueError("at least one formula is required")

    indexed = _index_inputs(inputs)
    symbols = {name: item.symbolic_name() for name, item in indexed.items()}
    symbols[latex.TIMES_NAME] = _SYMBOLIC_TIMES
    values = {name: item.display_value() for name, item in indexed.items()}
    values[latex.TIMES_NAME] = _SUBSTITUTED_TIMES

    symbolic = []
    substituted = []
    for formula in formulas:
        names = variables(formula)
        for name in names:
            if name not in indexed:
                raise UnresolvedVariableError(name, formula)

        template = Template(formula)
        symbolic.append(_tidy(template.substitute(symbols)))
        if names:
            substituted.append(_tidy(template.substitute(values)))

    step = (*symbolic, *substituted, answer)
    logger.debug("Solved step %s -> %s (%d parts)", symbolic[0], answer, len(step))
    return step
