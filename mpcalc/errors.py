"""Exceptions raised by the calculator core.

Errors raised by the arithmetic primitives themselves (ZeroDivisionError,
ValueError, mpmath errors) are not wrapped and reach the caller unchanged.
"""


class CalculatorError(Exception):
    """Base class for dispatch errors."""


class UnknownFunction(CalculatorError, LookupError):
    """Raised when a function name is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Invalid function: {name}")
        self.name = name


class ArityMismatch(CalculatorError, ValueError):
    """Raised when a function is called with the wrong number of arguments."""


class UnsupportedArgument(CalculatorError, TypeError):
    """Raised when an argument is not one of the supported number representations."""


class AmbiguousResolution(CalculatorError, TypeError):
    """Raised in strict mode when two argument implementations are incomparable."""


class SettingsError(CalculatorError):
    """Raised when calculator configuration is invalid."""
