"""
Calculator error types.
"""


class CalculatorError(Exception):
    """Base class for every error raised by the calculator."""


class InvalidArgumentError(CalculatorError, ValueError):
    """Bad input: too few operands, null operand, unsupported type or non-numeric text."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """A divisor after the first operand was exactly zero."""

    def __init__(self, message: str = "Division by zero not allowed"):
        super().__init__(message)
