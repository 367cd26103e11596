"""Sample spacing used to scale Savitzky-Golay derivatives.

The convolution weights differentiate with respect to the sample index.
Dividing by ``step**derivative`` converts the result into a derivative with
respect to the sample positions. For a constant step this divisor is exact;
for explicit coordinates the step is estimated locally as the mean spacing
over the window around each sample.
"""

from __future__ import annotations

import numpy as np

from savgolkit.utils.types import FloatArray

__all__ = ["spacing_divisor", "local_step_sizes", "spacing_divisors"]


def _window_bounds(
    center: int | np.ndarray,
    half: int,
    n_positions: int,
) -> tuple[int | np.ndarray, int | np.ndarray]:
    """Returns the clipped range ``[lo, hi)`` of spacings around ``center``."""
    lo = np.maximum(center - half, 0)
    hi = np.minimum(center + half, n_positions - 1)
    return lo, hi


def spacing_divisor(
    x: FloatArray,
    center: int,
    half: int,
    derivative: int,
) -> float:
    """Computes the derivative divisor of a single sample.

    The mean of ``x[i + 1] - x[i]`` is taken over ``i`` in
    ``[center - half, center + half)``, restricted to valid indices, and
    raised to the power ``derivative``.

    Args:
        x: The sample coordinates.
        center: The index of the output sample.
        half: The half-width of the filter window.
        derivative: The derivative order.

    Returns:
        The divisor ``mean_step**derivative``.

    Raises:
        ValueError: If fewer than two coordinates are given.
    """
    x = np.asarray(x, dtype=float)
    if x.shape[0] < 2:
        raise ValueError("at least two positions are needed to estimate a step.")
    lo, hi = _window_bounds(center, half, x.shape[0])
    mean_step = float(np.mean(np.diff(x[lo:hi + 1])))
    return mean_step**derivative


def local_step_sizes(x: FloatArray, half: int) -> FloatArray:
    """Computes the mean local step around every sample.

    Equivalent to ``spacing_divisor(x, c, half, 1)`` for every index ``c``.
    The differences telescope, so each mean is
    ``(x[hi] - x[lo]) / (hi - lo)``.

    Args:
        x: The sample coordinates.
        half: The half-width of the filter window (at least 1).

    Returns:
        An array with the same length as ``x``.

    Raises:
        ValueError: If fewer than two coordinates are given or ``half < 1``.
    """
    x = np.asarray(x, dtype=float)
    if x.shape[0] < 2:
        raise ValueError("at least two positions are needed to estimate a step.")
    if half < 1:
        raise ValueError(f"half must be at least 1 but is {half}.")
    centers = np.arange(x.shape[0])
    lo, hi = _window_bounds(centers, half, x.shape[0])
    return (x[hi] - x[lo]) / (hi - lo)


def spacing_divisors(
    x: float | FloatArray,
    half: int,
    derivative: int,
) -> float | FloatArray:
    """Returns the derivative divisors for a validated positions argument.

    Args:
        x: A constant step or the sample coordinates.
        half: The half-width of the filter window.
        derivative: The derivative order.

    Returns:
        ``x**derivative`` as a float for a constant step, otherwise one
        divisor per sample.
    """
    if np.ndim(x) == 0:
        return float(x) ** derivative
    return local_step_sizes(x, half) ** derivative
