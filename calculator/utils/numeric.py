"""Numeric utilities for consistent Decimal handling."""

import re
from decimal import Decimal

# Plain decimal numeral, optionally in exponent notation: "-1", "2.", ".5", "1.25E-3"
# ASCII only: \d would also accept digits such as "٣"
DECIMAL_NUMERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)


def D(text: str) -> Decimal:
    """
    Exact Decimal from decimal numeral text.

    Single source of truth for numeric conversions. Callers turn numbers into
    their shortest text first, so binary floating-point artifacts never reach
    the Decimal.

    Args:
        text: Numeral matching DECIMAL_NUMERAL

    Returns:
        Decimal: Parsed value, scale preserved
    """
    return Decimal(text)


def is_decimal_numeral(text: str) -> bool:
    """True if text is a finite decimal numeral with no surrounding whitespace."""
    return DECIMAL_NUMERAL.fullmatch(text) is not None


def scale_of(value: Decimal) -> int:
    """Digits to the right of the decimal point (negative for E+n notation)."""
    return -value.as_tuple().exponent
