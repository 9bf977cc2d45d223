"""
Operand models.
"""

from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import InvalidArgumentError
from ..utils.numeric import is_decimal_numeral


class OperandKind(Enum):
    """Accepted source forms of an operand."""
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    CHARACTER = "character"


@dataclass(frozen=True)
class Operand:
    """Operand tagged with its source form (immutable)."""
    kind: OperandKind
    value: Any

    @classmethod
    def classify(cls, raw: Any) -> "Operand":
        """
        Tag a raw value with its operand kind.

        Args:
            raw: int, float, Decimal, or str value

        Returns:
            Operand wrapping the raw value

        Raises:
            InvalidArgumentError: If raw is None or of an unsupported type
        """
        if raw is None:
            raise InvalidArgumentError("No argument may be null")
        # bool is an int subclass but is not a number here
        if isinstance(raw, bool):
            raise InvalidArgumentError(f"Unsupported operand type: {_type_name(raw)}")
        if isinstance(raw, int):
            return cls(OperandKind.INTEGER, raw)
        if isinstance(raw, Decimal):
            kind = OperandKind.INTEGER if raw.is_finite() and raw.as_tuple().exponent >= 0 else OperandKind.FLOAT
            return cls(kind, raw)
        if isinstance(raw, float):
            return cls(OperandKind.FLOAT, raw)
        if isinstance(raw, str):
            if len(raw) == 1:
                return cls(OperandKind.CHARACTER, raw)
            return cls(OperandKind.TEXT, raw)
        raise InvalidArgumentError(f"Unsupported operand type: {_type_name(raw)}")

    @property
    def is_numeric(self) -> bool:
        """True if the operand was supplied as a number rather than text."""
        return self.kind in (OperandKind.INTEGER, OperandKind.FLOAT)

    def canonical_text(self) -> str:
        """
        Canonical decimal text of the operand, ready for an exact parse.

        Numbers use their shortest round-trip text (never the binary value),
        text and characters must match the decimal numeral grammar.

        Returns:
            Decimal numeral text

        Raises:
            InvalidArgumentError: If the value is not a finite decimal numeral
        """
        if self.is_numeric:
            if isinstance(self.value, Decimal):
                text = str(self.value)
            elif self.kind is OperandKind.FLOAT:
                text = repr(float(self.value))
            else:
                # str(int) refuses very long integers
                text = str(Decimal(int(self.value)))
            if not is_decimal_numeral(text):
                # nan, inf
                raise InvalidArgumentError(f"Non-numeric value: {text}")
            return text

        if not is_decimal_numeral(self.value):
            if self.kind is OperandKind.CHARACTER:
                raise InvalidArgumentError(f"Non-numeric character: {self.value}")
            raise InvalidArgumentError(f"Non-numeric string: {self.value}")
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def _type_name(value: Any) -> str:
    value_type = type(value)
    if value_type.__module__ == "builtins":
        return value_type.__qualname__
    return f"{value_type.__module__}.{value_type.__qualname__}"
