"""
Unit tests for operand classification and decoding.
"""

import os
import sys
import unittest
from decimal import Decimal
from fractions import Fraction

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from calculator.errors import InvalidArgumentError
from calculator.models.operand import Operand, OperandKind


class TestOperandClassify(unittest.TestCase):
    """Test Operand.classify."""

    def test_numbers(self):
        """Ints, floats and Decimals are numeric kinds."""
        self.assertEqual(Operand.classify(2).kind, OperandKind.INTEGER)
        self.assertEqual(Operand.classify(2.5).kind, OperandKind.FLOAT)
        self.assertEqual(Operand.classify(Decimal('10')).kind, OperandKind.INTEGER)
        self.assertEqual(Operand.classify(Decimal('1.50')).kind, OperandKind.FLOAT)
        self.assertTrue(Operand.classify(2).is_numeric)

    def test_text_and_characters(self):
        """One-character strings are characters, longer strings are text."""
        self.assertEqual(Operand.classify('7').kind, OperandKind.CHARACTER)
        self.assertEqual(Operand.classify('7.5').kind, OperandKind.TEXT)
        self.assertEqual(Operand.classify('').kind, OperandKind.TEXT)
        self.assertFalse(Operand.classify('7').is_numeric)

    def test_none_rejected(self):
        """None is never an operand."""
        with self.assertRaises(InvalidArgumentError) as ctx:
            Operand.classify(None)
        self.assertEqual(str(ctx.exception), 'No argument may be null')

    def test_unsupported_types(self):
        """Bools and other types are rejected with their type name."""
        with self.assertRaises(InvalidArgumentError) as ctx:
            Operand.classify(True)
        self.assertEqual(str(ctx.exception), 'Unsupported operand type: bool')

        with self.assertRaises(InvalidArgumentError) as ctx:
            Operand.classify(Fraction(1, 3))
        self.assertEqual(str(ctx.exception), 'Unsupported operand type: fractions.Fraction')

        with self.assertRaises(InvalidArgumentError):
            Operand.classify(1 + 2j)


class TestOperandCanonicalText(unittest.TestCase):
    """Test Operand.canonical_text."""

    def test_float_uses_shortest_repr(self):
        """Floats keep their literal digits, never the binary expansion."""
        self.assertEqual(Operand.classify(0.1).canonical_text(), '0.1')
        self.assertEqual(Operand.classify(2.0).canonical_text(), '2.0')
        self.assertEqual(Operand.classify(-3.3).canonical_text(), '-3.3')

    def test_integer_and_decimal(self):
        """Ints and Decimals round-trip through str."""
        self.assertEqual(Operand.classify(-42).canonical_text(), '-42')
        self.assertEqual(Operand.classify(Decimal('1.230')).canonical_text(), '1.230')

    def test_long_integer(self):
        """Integers beyond the int/str digit limit still convert."""
        value = 7 * 10 ** 5000
        self.assertEqual(Operand.classify(value).canonical_text(), '7' + '0' * 5000)
        self.assertEqual(Operand.classify(-value).canonical_text(), '-7' + '0' * 5000)

    def test_text_passes_through(self):
        """Valid numerals are returned unchanged."""
        for text in ('12', '-0.5', '+3', '.25', '2.', '1.5E-3', '9'):
            self.assertEqual(Operand.classify(text).canonical_text(), text)

    def test_non_finite_numbers(self):
        """NaN and infinities are not decimal numerals."""
        for value in (float('nan'), float('inf'), Decimal('NaN'), Decimal('-Infinity')):
            with self.assertRaises(InvalidArgumentError):
                Operand.classify(value).canonical_text()

    def test_non_numeric_character(self):
        """Message names the offending character."""
        with self.assertRaises(InvalidArgumentError) as ctx:
            Operand.classify('f').canonical_text()
        self.assertEqual(str(ctx.exception), 'Non-numeric character: f')

    def test_non_numeric_text(self):
        """Message names the offending text."""
        for text in ('abc', ' 1', '1_000', 'NaN', 'Infinity', '1,5', '2+3', ''):
            with self.assertRaises(InvalidArgumentError) as ctx:
                Operand.classify(text).canonical_text()
            self.assertEqual(str(ctx.exception), f'Non-numeric string: {text}')

    def test_non_ascii_digits(self):
        """Only ASCII digits 0-9 are numerals."""
        with self.assertRaises(InvalidArgumentError) as ctx:
            Operand.classify('\u0663').canonical_text()
        self.assertEqual(str(ctx.exception), 'Non-numeric character: \u0663')

        with self.assertRaises(InvalidArgumentError):
            Operand.classify('1\uff12').canonical_text()

    def test_sign_only_character(self):
        """A lone sign is not a numeral."""
        with self.assertRaises(InvalidArgumentError) as ctx:
            Operand.classify('-').canonical_text()
        self.assertEqual(str(ctx.exception), 'Non-numeric character: -')


if __name__ == '__main__':
    unittest.main()
