"""Utility functions for SavGolKit package."""

from .validate import (
    validate_derivative,
    validate_polynomial,
    validate_positions,
    validate_signal,
    validate_window_size,
)

__all__ = [
    "validate_window_size",
    "validate_signal",
    "validate_positions",
    "validate_derivative",
    "validate_polynomial",
]
