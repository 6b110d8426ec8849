"""
Exceptions raised by the pricing and derivation engine.
"""


class OptionPricingError(Exception):
    """Base exception for all pricing and derivation errors."""
    pass


class InvalidParameterError(OptionPricingError, ValueError):
    """Raised when a contract parameter violates its precondition."""
    pass


class InvalidPrecisionError(OptionPricingError, ValueError):
    """Raised when a non-positive rounding precision is requested."""
    pass


class UnresolvedVariableError(OptionPricingError, LookupError):
    """Raised when a formula template references a variable with no input."""

    def __init__(self, name: str, template: str):
        super().__init__(f"No input supplied for variable '{name}' in formula: {template}")
        self.name = name
        self.template = template
