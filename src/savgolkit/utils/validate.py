"""Validation utilities for the Savitzky-Golay filter."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence, Set
from typing import Any

import numpy as np

from savgolkit.utils.types import FloatArray

__all__ = [
    "as_integer",
    "validate_window_size",
    "validate_signal",
    "validate_positions",
    "validate_derivative",
    "validate_polynomial",
]

#: The smallest supported window size.
MIN_WINDOW_SIZE = 5


def as_integer(value: Any, name: str) -> int:
    """Converts an integer-valued option to ``int``.

    Integral floats such as ``5.0`` are accepted.

    Args:
        value: The option value.
        name: The option name used in error messages.

    Returns:
        The value as a Python ``int``.

    Raises:
        TypeError: If ``value`` is not a real number.
        ValueError: If ``value`` is a real number without an integer value.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be an integer; got {type(value).__name__}.")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not float(value).is_integer():
        raise ValueError(f"{name} must be an integer but is {value}.")
    return int(value)


def validate_window_size(window_size: Any) -> int:
    """Validates that the window size is an odd integer of at least 5.

    Raises:
        ValueError: If the window size is even, too small or not an integer.
    """
    try:
        size = as_integer(window_size, "window_size")
    except ValueError as exc:
        raise ValueError(
            "Invalid window size (should be odd and at least "
            f"{MIN_WINDOW_SIZE} integer number); got {window_size}."
        ) from exc
    if size % 2 == 0 or size < MIN_WINDOW_SIZE:
        raise ValueError(
            "Invalid window size (should be odd and at least "
            f"{MIN_WINDOW_SIZE} integer number); got {window_size}."
        )
    return size


def validate_signal(y: Any) -> FloatArray:
    """Validates the signal and converts it into a 1D float array.

    Args:
        y: A list, tuple, other non-string sequence, or 1D NumPy array.

    Returns:
        A new float64 array holding the signal values.

    Raises:
        TypeError: If ``y`` is not a sequence.
        ValueError: If ``y`` is not one-dimensional or has non-finite values.
    """
    if isinstance(y, np.ndarray):
        if y.ndim == 0:
            raise TypeError("Y values must be an array; got a 0-d array.")
        if y.ndim != 1:
            raise ValueError(f"Y values must be one-dimensional; got ndim={y.ndim}.")
    elif (
        not isinstance(y, Sequence)
        or isinstance(y, (str, bytes, bytearray, Mapping, Set))
    ):
        raise TypeError(f"Y values must be an array; got {type(y).__name__}.")

    y_arr = np.array(y, dtype=float)
    if y_arr.ndim != 1:
        raise ValueError(f"Y values must be one-dimensional; got ndim={y_arr.ndim}.")
    if not np.all(np.isfinite(y_arr)):
        raise ValueError("Y values must be finite.")
    return y_arr


def validate_positions(
    x: Any,
    n_samples: int,
    derivative: int = 0,
) -> float | FloatArray:
    """Validates the sample positions.

    Args:
        x: Either a scalar step between consecutive samples or the sample
            coordinates (a sequence of length ``n_samples``). Monotonicity of
            the coordinates is not checked.
        n_samples: The number of samples in the signal.
        derivative: The derivative order. A zero step is only an error when
            it is used as a divisor, i.e. for ``derivative > 0``.

    Returns:
        The step as a ``float``, or the coordinates as a float64 array.

    Raises:
        TypeError: If ``x`` is ``None``.
        ValueError: If the step is not finite or is zero for a derivative,
            or if the coordinates are not one-dimensional, have the wrong
            length, or contain non-finite values.
    """
    if x is None:
        raise TypeError("X must be defined.")

    if np.ndim(x) == 0:
        step = float(x)
        if not np.isfinite(step):
            raise ValueError(f"The sampling step must be finite; got {x}.")
        if step == 0.0 and derivative > 0:
            raise ValueError(
                f"The sampling step must be non-zero for derivative {derivative}."
            )
        return step

    x_arr = np.array(x, dtype=float)
    if x_arr.ndim != 1:
        raise ValueError(f"X values must be one-dimensional; got ndim={x_arr.ndim}.")
    if x_arr.shape[0] != n_samples:
        raise ValueError(
            "X and Y must have the same length; "
            f"got {x_arr.shape[0]} and {n_samples}."
        )
    if not np.all(np.isfinite(x_arr)):
        raise ValueError("X values must be finite.")
    return x_arr


def validate_derivative(derivative: Any) -> int:
    """Validates that the derivative order is a non-negative integer.

    Raises:
        ValueError: If the derivative order is negative or not an integer.
    """
    try:
        order = as_integer(derivative, "derivative")
    except ValueError as exc:
        raise ValueError(
            f"Derivative should be a positive integer; got {derivative}."
        ) from exc
    if order < 0:
        raise ValueError(f"Derivative should be a positive integer; got {derivative}.")
    return order


def validate_polynomial(polynomial: Any, window_size: int) -> int:
    """Validates the degree of the fitted polynomial.

    Args:
        polynomial: The polynomial degree.
        window_size: The (validated) window size.

    Returns:
        The degree as an ``int``.

    Raises:
        ValueError: If the degree is smaller than 1, not an integer, or not
            smaller than ``window_size``.
    """
    try:
        degree = as_integer(polynomial, "polynomial")
    except ValueError as exc:
        raise ValueError(
            f"Polynomial should be a positive integer; got {polynomial}."
        ) from exc
    if degree < 1:
        raise ValueError(f"Polynomial should be a positive integer; got {polynomial}.")
    if degree >= window_size:
        raise ValueError(
            f"Polynomial degree ({degree}) must be smaller than the window size "
            f"({window_size})."
        )
    return degree
