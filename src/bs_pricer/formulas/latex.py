"""
LaTeX syntax helpers used to build formula templates.

The helpers only concatenate strings; they know nothing about placeholders,
so the same helper builds both ``\\frac{S}{K}`` and ``\\frac{${S}}{${K}}``.
"""

# Reserved placeholder for implicit multiplication: a space in the symbolic
# formula, an explicit times sign once numbers are substituted in
TIMES_NAME = "times"
TIMES = "${" + TIMES_NAME + "}"


def placeholder(name: str) -> str:
    """Return the template placeholder for a variable name."""
    return "${" + name + "}"


def fraction(numerator: str, denominator: str) -> str:
    return r"\frac{" + numerator + "}{" + denominator + "}"


def exponential(exponent: str) -> str:
    return "e^{" + exponent + "}"


def power(base: str, exponent: str) -> str:
    return base + "^{" + exponent + "}"


def square_root(radicand: str) -> str:
    return r"\sqrt{" + radicand + "}"


def parentheses(content: str) -> str:
    return r"\left( " + content + r" \right)"


def natural_log(argument: str) -> str:
    return r"\ln" + parentheses(argument)


def standard_normal_cdf(argument: str) -> str:
    """Standard normal cumulative distribution function, N(x)."""
    return r"\mathrm{N}" + parentheses(argument)


def standard_normal_pdf(argument: str) -> str:
    """Standard normal probability density function, N'(x)."""
    return r"\mathrm{N'}" + parentheses(argument)
