"""Operand models."""
