"""Arithmetic pipeline, decimal backends and observers."""
