"""Observers notified of calculator activity."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

logger = logging.getLogger(__name__)


class CalculationObserver(ABC):
    """Receives one record per completed or rejected calculation."""

    @abstractmethod
    def on_result(self, operation: str, operands: Sequence[Any], result: Any) -> None:
        """
        Called after an operation has produced its rounded result.

        Args:
            operation: Operation name ('add', 'subtract', 'multiply', 'divide')
            operands: Operands exactly as the caller passed them
            result: Rounded exact result, before float conversion
        """
        pass

    @abstractmethod
    def on_division_by_zero(self, operation: str, divisor: Any) -> None:
        """Called right before a division by zero is raised."""
        pass


class LoggingObserver(CalculationObserver):
    """Writes calculator records to the standard logging tree."""

    def __init__(self, log: logging.Logger = None):
        self.log = log or logger

    def on_result(self, operation: str, operands: Sequence[Any], result: Any) -> None:
        self.log.info("calculation_completed", extra={
            "operation": operation,
            "operands": [str(operand) for operand in operands],
            "result": str(result),
        })

    def on_division_by_zero(self, operation: str, divisor: Any) -> None:
        self.log.error("division_by_zero", extra={
            "operation": operation,
            "divisor": str(divisor),
        })


class NullObserver(CalculationObserver):
    """Discards every record."""

    def on_result(self, operation: str, operands: Sequence[Any], result: Any) -> None:
        pass

    def on_division_by_zero(self, operation: str, divisor: Any) -> None:
        pass
