"""Savitzky-Golay convolution weights built from Gram polynomials.

The weight matrix of a window of ``2 * half + 1`` samples has one row per
evaluation offset ``t`` in ``[-half, half]`` and one column per sample
offset ``j`` in ``[-half, half]``. Row ``half`` evaluates the local fit at
the window center; the other rows evaluate the same fit off-center and are
used at the signal boundaries.

Examples:
=========

The classic five point quadratic smoothing coefficients::
>>> import numpy as np
>>> from savgolkit.weights.weight_matrix import weight_matrix
>>> w = weight_matrix(5, 2, 0)
>>> bool(np.allclose(35 * w[2], [-3, 12, 17, 12, -3]))
True
"""

from __future__ import annotations

import operator

import numpy as np
from numpy.typing import NDArray

from savgolkit.logger import savgolkit_logger
from savgolkit.utils.caching import read_only_array_cache
from savgolkit.weights.factorial import generalized_factorial
from savgolkit.weights.gram import gram_polynomial

__all__ = ["weight", "build_weight_matrix", "weight_matrix"]


def weight(i: int, t: int, m: int, n: int, s: int) -> float:
    """Computes a single convolution weight.

    Args:
        i: The offset of the window sample from the window center.
        t: The offset of the evaluation point from the window center.
        m: The half-width of the window.
        n: The degree of the fitted polynomial.
        s: The derivative order.

    Returns:
        The contribution of sample ``i`` to the ``s``-th derivative of the
        degree ``n`` least-squares fit evaluated at ``t``.
    """
    total = 0.0
    for k in range(n + 1):
        norm = generalized_factorial(2 * m, k) / generalized_factorial(
            2 * m + k + 1, k + 1
        )
        total += (
            (2 * k + 1)
            * norm
            * gram_polynomial(i, m, k, 0)
            * gram_polynomial(t, m, k, s)
        )
    return total


def build_weight_matrix(
    window_size: int,
    polynomial: int,
    derivative: int,
) -> NDArray[np.float64]:
    """Builds the full convolution weight matrix of a window.

    Args:
        window_size: The number of samples in the window. Must be odd and at
            least 3.
        polynomial: The degree of the fitted polynomial. Must be
            non-negative.
        derivative: The derivative order. Must be non-negative.

    Returns:
        A new array of shape ``(window_size, window_size)``. Entry
        ``[t + half, j + half]`` is the weight of sample offset ``j`` for the
        evaluation offset ``t``.

    Raises:
        TypeError: If any of the arguments is not an integer.
        ValueError: If any of the arguments is out of range.
    """
    window_size = operator.index(window_size)
    polynomial = operator.index(polynomial)
    derivative = operator.index(derivative)
    if window_size < 3 or window_size % 2 == 0:
        raise ValueError(
            f"window_size must be an odd integer >= 3 but is {window_size}."
        )
    if polynomial < 0:
        raise ValueError(f"polynomial must be non-negative but is {polynomial}.")
    if derivative < 0:
        raise ValueError(f"derivative must be non-negative but is {derivative}.")

    half = window_size // 2
    weights = np.empty((window_size, window_size), dtype=np.float64)
    for t in range(-half, half + 1):
        for j in range(-half, half + 1):
            weights[t + half, j + half] = weight(j, t, half, polynomial, derivative)
    return weights


@read_only_array_cache(maxsize=128, convert=operator.index)
def weight_matrix(
    window_size: int,
    polynomial: int,
    derivative: int,
) -> NDArray[np.float64]:
    """Returns the shared, read-only weight matrix for a filter configuration.

    This is a read-through cache around :func:`build_weight_matrix`; see
    there for the arguments, which may be passed by keyword. Arguments must be
    integers (:func:`operator.index`), so ``5.0`` raises ``TypeError`` whether
    or not ``5`` is cached. The returned array must not be modified; use
    :func:`build_weight_matrix` for a private, writeable copy.
    """
    savgolkit_logger.debug(
        "Building Savitzky-Golay weights (window_size=%d, polynomial=%d, "
        "derivative=%d).",
        window_size,
        polynomial,
        derivative,
    )
    return build_weight_matrix(window_size, polynomial, derivative)
