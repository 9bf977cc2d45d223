"""
decicalc - exact decimal calculator.

Adds, subtracts, multiplies and divides ints, floats, Decimals, numeric text
and single numeric characters with exact decimal arithmetic and half-up
rounding to an operation-specific scale.
"""

from calculator.arithmetic.calculator import (
    DecimalCalculator,
    add,
    divide,
    multiply,
    subtract,
)
from calculator.errors import CalculatorError, DivisionByZeroError, InvalidArgumentError

__all__ = [
    "DecimalCalculator",
    "add",
    "subtract",
    "multiply",
    "divide",
    "CalculatorError",
    "InvalidArgumentError",
    "DivisionByZeroError",
]
