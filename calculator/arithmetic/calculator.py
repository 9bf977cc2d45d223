"""
Exact decimal calculator.

Every operation runs the same pipeline:
validate -> classify/coerce -> exact compute -> pick output scale -> round half-up -> float.

Output scale per operation:
- add:      max scale of all operands
- subtract: max scale of all operands (first minus the sum of the rest)
- multiply: sum of the scales of all operands
- divide:   max scale of all operands; each step keeps extra guard digits
"""

from typing import Any, List, Optional, Sequence

from configs import config_loader

from ..errors import DivisionByZeroError, InvalidArgumentError
from ..models.operand import Operand
from .backend import DecimalBackend, PyDecimalBackend
from .observer import CalculationObserver, LoggingObserver

DEFAULT_DIVISION_EXTRA_DIGITS = 2


class DecimalCalculator:
    """Stateless calculator over mixed numeric operands."""

    def __init__(
        self,
        backend: Optional[DecimalBackend] = None,
        observer: Optional[CalculationObserver] = None,
        division_extra_digits: Optional[int] = None,
    ):
        """
        Initialize calculator.

        Args:
            backend: Exact decimal arithmetic (default: PyDecimalBackend)
            observer: Receives result/error records (default: LoggingObserver)
            division_extra_digits: Guard digits kept by each division step.
                Defaults to the 'calculator' config section, then 2.
        """
        if division_extra_digits is None:
            division_extra_digits = config_loader.get_config('calculator').get(
                'division_extra_digits', DEFAULT_DIVISION_EXTRA_DIGITS
            )
        if division_extra_digits < 0:
            raise ValueError(f"division_extra_digits must be non-negative, got {division_extra_digits}")

        self.backend = backend or PyDecimalBackend()
        self.observer = observer or LoggingObserver()
        self.division_extra_digits = division_extra_digits

    def validate(self, operation: str, operands: Sequence[Any]) -> None:
        """
        Check that at least two operands were supplied and none is null.

        Raises:
            InvalidArgumentError: On fewer than two operands or a None operand
        """
        if operands is None or len(operands) < 2:
            raise InvalidArgumentError(f"At least two arguments must be supplied for {operation}")
        if any(operand is None for operand in operands):
            raise InvalidArgumentError("No argument may be null")

    def to_exact_decimal(self, raw: Any) -> Any:
        """Convert one raw operand to the backend's exact decimal."""
        return self.backend.parse(Operand.classify(raw).canonical_text())

    def to_exact_decimal_list(self, operands: Sequence[Any]) -> List[Any]:
        """Convert operands in order."""
        return [self.to_exact_decimal(raw) for raw in operands]

    def _max_scale(self, values: Sequence[Any]) -> int:
        return max((self.backend.scale_of(v) for v in values), default=0)

    def add(self, *operands: Any) -> float:
        """
        Sum operands.

        Result scale is the largest operand scale.
        """
        self.validate("add", operands)
        values = self.to_exact_decimal_list(operands)
        scale = self._max_scale(values)
        total = self.backend.round_to_scale(self.backend.sum(values), scale)
        return self._finish("add", operands, total)

    def subtract(self, *operands: Any) -> float:
        """
        Subtract every following operand from the first.

        Result scale is the largest operand scale.
        """
        self.validate("subtract", operands)
        first, *rest = self.to_exact_decimal_list(operands)
        scale = max(self.backend.scale_of(first), self._max_scale(rest))
        difference = self.backend.subtract(first, self.backend.sum(rest))
        difference = self.backend.round_to_scale(difference, scale)
        return self._finish("subtract", operands, difference)

    def multiply(self, *operands: Any) -> float:
        """
        Multiply operands.

        Result scale is the sum of the operand scales, so the product is
        already exact at that scale.
        """
        self.validate("multiply", operands)
        values = self.to_exact_decimal_list(operands)
        scale = sum(self.backend.scale_of(v) for v in values)
        product = self.backend.round_to_scale(self.backend.product(values), scale)
        return self._finish("multiply", operands, product)

    def divide(self, *operands: Any) -> float:
        """
        Divide the first operand by each following operand, left to right.

        Each step keeps `division_extra_digits` guard digits beyond the
        result scale (largest operand scale), then the quotient is rounded
        half-up to the result scale.

        Raises:
            DivisionByZeroError: If any divisor equals zero
        """
        self.validate("divide", operands)
        first, *divisors = self.to_exact_decimal_list(operands)
        scale = max(self.backend.scale_of(first), self._max_scale(divisors))
        step_scale = scale + self.division_extra_digits

        quotient = first
        for divisor in divisors:
            if self.backend.is_zero(divisor):
                self.observer.on_division_by_zero("divide", divisor)
                raise DivisionByZeroError()
            quotient = self.backend.divide(quotient, divisor, step_scale)

        quotient = self.backend.round_to_scale(quotient, scale)
        return self._finish("divide", operands, quotient)

    def _finish(self, operation: str, operands: Sequence[Any], result: Any) -> float:
        self.observer.on_result(operation, operands, result)
        return self.backend.to_float(result)


_default_calculator: Optional[DecimalCalculator] = None


def default_calculator() -> DecimalCalculator:
    """Shared calculator with default backend, observer and config."""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = DecimalCalculator()
    return _default_calculator


def add(*operands: Any) -> float:
    return default_calculator().add(*operands)


def subtract(*operands: Any) -> float:
    return default_calculator().subtract(*operands)


def multiply(*operands: Any) -> float:
    return default_calculator().multiply(*operands)


def divide(*operands: Any) -> float:
    return default_calculator().divide(*operands)
