"""Exact decimal arithmetic backends."""

from abc import ABC, abstractmethod
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Overflow,
    ROUND_HALF_UP,
)
from typing import Any, Iterable

from ..utils.numeric import D, scale_of


class DecimalBackend(ABC):
    """
    Arbitrary-precision base-10 arithmetic used by the calculator.

    Implementations must be stateless so a single instance can be shared
    across threads.
    """

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse a decimal numeral into an exact value."""
        pass

    @abstractmethod
    def to_text(self, value: Any) -> str:
        """Canonical text of an exact value."""
        pass

    @abstractmethod
    def add(self, left: Any, right: Any) -> Any:
        pass

    @abstractmethod
    def subtract(self, left: Any, right: Any) -> Any:
        pass

    @abstractmethod
    def multiply(self, left: Any, right: Any) -> Any:
        pass

    @abstractmethod
    def divide(self, dividend: Any, divisor: Any, scale: int) -> Any:
        """
        Divide to exactly `scale` fractional digits, rounding half-up.

        Args:
            dividend: Exact dividend
            divisor: Exact, non-zero divisor
            scale: Fractional digits of the quotient

        Returns:
            Quotient with the requested scale
        """
        pass

    @abstractmethod
    def round_to_scale(self, value: Any, scale: int) -> Any:
        """Round half-up to exactly `scale` fractional digits."""
        pass

    @abstractmethod
    def scale_of(self, value: Any) -> int:
        pass

    @abstractmethod
    def compare(self, left: Any, right: Any) -> int:
        """-1, 0 or 1 by numeric value, ignoring scale."""
        pass

    @abstractmethod
    def to_float(self, value: Any) -> float:
        pass

    @abstractmethod
    def zero(self) -> Any:
        pass

    @abstractmethod
    def one(self) -> Any:
        pass

    def is_zero(self, value: Any) -> bool:
        """True if value equals zero at any scale."""
        return self.compare(value, self.zero()) == 0

    def sum(self, values: Iterable[Any]) -> Any:
        """Exact sum of values, zero for an empty iterable."""
        total = self.zero()
        for value in values:
            total = self.add(total, value)
        return total

    def product(self, values: Iterable[Any]) -> Any:
        """Exact product of values seeded with one."""
        total = self.one()
        for value in values:
            total = self.multiply(total, value)
        return total


class PyDecimalBackend(DecimalBackend):
    """Backend on the standard library `decimal` module."""

    _ZERO = Decimal(0)
    _ONE = Decimal(1)

    @staticmethod
    def _exact_context() -> Context:
        # Fresh per operation; contexts carry mutable flags
        return Context(
            prec=MAX_PREC,
            rounding=ROUND_HALF_UP,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )

    def parse(self, text: str) -> Decimal:
        return D(text)

    def to_text(self, value: Decimal) -> str:
        return str(value)

    def add(self, left: Decimal, right: Decimal) -> Decimal:
        return self._exact_context().add(left, right)

    def subtract(self, left: Decimal, right: Decimal) -> Decimal:
        return self._exact_context().subtract(left, right)

    def multiply(self, left: Decimal, right: Decimal) -> Decimal:
        return self._exact_context().multiply(left, right)

    def divide(self, dividend: Decimal, divisor: Decimal, scale: int) -> Decimal:
        if self.is_zero(divisor):
            raise ZeroDivisionError("divisor is zero")

        dividend_sign, dividend_coeff, dividend_exp = self._split(dividend)
        divisor_sign, divisor_coeff, divisor_exp = self._split(divisor)

        # quotient * 10**scale = (a / b) * 10**shift, done in integers
        shift = dividend_exp - divisor_exp + scale
        numerator = dividend_coeff
        denominator = divisor_coeff
        if shift >= 0:
            numerator *= 10 ** shift
        else:
            denominator *= 10 ** -shift

        quotient, remainder = divmod(numerator, denominator)
        if 2 * remainder >= denominator:
            quotient += 1

        result = Decimal(quotient).scaleb(-scale, context=self._exact_context())
        if quotient and dividend_sign != divisor_sign:
            return result.copy_negate()
        return result

    def round_to_scale(self, value: Decimal, scale: int) -> Decimal:
        exponent = Decimal((0, (1,), -scale))
        rounded = value.quantize(exponent, context=self._exact_context())
        if rounded.is_zero():
            # no negative zero in results
            return rounded.copy_abs()
        return rounded

    def scale_of(self, value: Decimal) -> int:
        return scale_of(value)

    def compare(self, left: Decimal, right: Decimal) -> int:
        if left < right:
            return -1
        if left > right:
            return 1
        return 0

    def to_float(self, value: Decimal) -> float:
        return float(value)

    def zero(self) -> Decimal:
        return self._ZERO

    def one(self) -> Decimal:
        return self._ONE

    def _split(self, value: Decimal):
        """Sign bit, integer coefficient and exponent of a finite Decimal."""
        sign, _, exponent = value.as_tuple()
        # integer conversion without a text round-trip, no digit limit
        coefficient = int(value.copy_abs().scaleb(-exponent, context=self._exact_context()))
        return sign, coefficient, exponent
