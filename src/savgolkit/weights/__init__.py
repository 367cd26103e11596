"""Convolution weights of the Savitzky-Golay filter."""

from savgolkit.weights.factorial import generalized_factorial
from savgolkit.weights.gram import gram_polynomial
from savgolkit.weights.weight_matrix import (
    build_weight_matrix,
    weight,
    weight_matrix,
)

__all__ = [
    "generalized_factorial",
    "gram_polynomial",
    "weight",
    "build_weight_matrix",
    "weight_matrix",
]
