"""Savitzky-Golay smoothing and differentiation of sampled signals.

Every output sample is the value (or a derivative) of a polynomial fitted
by least squares to the ``window_size`` samples around it. The fit is a
fixed linear combination of the samples, so the filter is a convolution
with weights from :func:`savgolkit.weights.weight_matrix.weight_matrix`.
The first and last ``half = window_size // 2`` samples are not at the
center of any full window; they are evaluated off-center on the fit of the
first and last full window instead of on a shrunken window.

Examples:
=========

Smoothing samples of a quadratic reproduces them exactly::
>>> import numpy as np
>>> from savgolkit import savitzky_golay
>>> x = np.linspace(0.0, 2.0, 21)
>>> y = 1.0 + 2.0 * x - 0.5 * x**2
>>> bool(np.allclose(savitzky_golay(y, x[1] - x[0], window_size=7, polynomial=2), y))
True

Differentiating with explicit sample coordinates::
>>> dy = savitzky_golay(y, x, window_size=7, polynomial=2, derivative=1)
>>> bool(np.allclose(dy, 2.0 - x))
True
"""

from __future__ import annotations

import warnings
from typing import Any, Dict

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from savgolkit.filter.diagnostics import make_diagnostics
from savgolkit.filter.savgol_config import (
    DEFAULT_DERIVATIVE,
    DEFAULT_POLYNOMIAL,
    DEFAULT_WINDOW_SIZE,
    POLYNOMIAL_ADVISORY_DEGREE,
    SavGolConfig,
)
from savgolkit.filter.spacing import spacing_divisors
from savgolkit.logger import savgolkit_logger
from savgolkit.utils.types import ArrayLike1D, FloatArray, Positions
from savgolkit.utils.validate import (
    validate_derivative,
    validate_polynomial,
    validate_positions,
    validate_signal,
    validate_window_size,
)
from savgolkit.weights.weight_matrix import weight_matrix

__all__ = ["savitzky_golay", "SavitzkyGolayFilter"]


def _warn_high_degree(polynomial: int) -> None:
    """Emits the oscillation advisory for high polynomial degrees."""
    message = (
        f"You should not use polynomial grade higher than "
        f"{POLYNOMIAL_ADVISORY_DEGREE - 1} (got {polynomial}) if you are not "
        "sure that your data arises from such a model. Possible polynomial "
        "oscillation problems."
    )
    savgolkit_logger.warning(message)
    warnings.warn(message, RuntimeWarning, stacklevel=3)


def _convolve(
    y: FloatArray,
    weights: FloatArray,
    divisor: float | FloatArray,
) -> FloatArray:
    """Applies the weight matrix to a validated signal.

    Args:
        y: The signal (at least ``window_size`` samples).
        weights: The weight matrix of shape ``(window_size, window_size)``.
        divisor: The derivative divisor, either one float or one value per
            sample.

    Returns:
        The filtered signal, same length as ``y``.
    """
    window_size = weights.shape[0]
    half = window_size // 2
    n_samples = y.shape[0]
    raw = np.empty(n_samples, dtype=np.float64)

    # Boundaries: off-center rows of the first and last full window.
    raw[:half] = weights[:half] @ y[:window_size]
    raw[n_samples - half:] = weights[half + 1:] @ y[n_samples - window_size:]

    # Interior: the center row slid across the signal.
    raw[half:n_samples - half] = sliding_window_view(y, window_size) @ weights[half]

    return raw / divisor


def savitzky_golay(
    y: ArrayLike1D,
    x: Positions,
    *,
    window_size: int = DEFAULT_WINDOW_SIZE,
    derivative: int = DEFAULT_DERIVATIVE,
    polynomial: int = DEFAULT_POLYNOMIAL,
    diagnostics: bool = False,
):
    """Smooths or differentiates a signal with a Savitzky-Golay filter.

    Args:
        y: The signal values. A list, tuple or 1D NumPy array.
        x: The sample positions. Either the constant step between
            consecutive samples, or the coordinates of every sample (same
            length as ``y``). With coordinates the step used to scale
            derivatives is the mean spacing over the window around each
            sample. Coordinates are assumed to be increasing; this is not
            checked.
        window_size: The number of samples in each local fit. Must be odd,
            at least 5 and not larger than ``len(y)``.
        derivative: The derivative order; ``0`` smooths the signal.
        polynomial: The degree of the local polynomial. Must be at least 1
            and smaller than ``window_size``. Degrees of 6 and above emit a
            ``RuntimeWarning``.
        diagnostics: If True, returns a diagnostics dictionary along with
            the filtered signal.

    Returns:
        If diagnostics is False: The filtered signal as a float array of the
        same length as ``y``.
        If diagnostics is True: A tuple (filtered signal, diagnostics_dict).

    Raises:
        TypeError: If ``y`` is not a sequence, ``x`` is ``None``, or an
            option is not a number.
        ValueError: If an option is out of range, the window is larger than
            the signal, or the signal or positions are malformed.
    """
    window_size = validate_window_size(window_size)
    y_arr = validate_signal(y)
    if x is None:
        raise TypeError("X must be defined.")
    if window_size > y_arr.shape[0]:
        raise ValueError(
            "Window size is higher than the data length "
            f"{window_size}>{y_arr.shape[0]}."
        )
    derivative = validate_derivative(derivative)
    polynomial = validate_polynomial(polynomial, window_size)
    x_val = validate_positions(x, y_arr.shape[0], derivative)
    if polynomial >= POLYNOMIAL_ADVISORY_DEGREE:
        _warn_high_degree(polynomial)

    weights = weight_matrix(window_size, polynomial, derivative)
    divisor = spacing_divisors(x_val, window_size // 2, derivative)
    y_filtered = _convolve(y_arr, weights, divisor)

    if not diagnostics:
        return y_filtered

    diag = make_diagnostics(
        y_filtered,
        weights,
        divisor,
        window_size,
        polynomial,
        derivative,
    )
    return y_filtered, diag


class SavitzkyGolayFilter:
    """Applies one Savitzky-Golay configuration to signals sampled at ``x``."""

    def __init__(
        self,
        x: Positions,
        config: SavGolConfig | None = None,
    ):
        """Initializes the SavitzkyGolayFilter instance.

        Args:
            x:
                The sample positions shared by every signal passed to
                :meth:`apply`: a constant step or the sample coordinates.
            config:
                An optional SavGolConfig instance with the filter options.
        """
        self.x = x
        self.config = config or SavGolConfig()

    def apply(
        self,
        y: ArrayLike1D,
        diagnostics: bool = False,
    ) -> FloatArray | tuple[FloatArray, Dict[str, Any]]:
        """Filters one signal.

        Args:
            y:
                The signal values, sampled at the positions given to the
                constructor.
            diagnostics:
                If True, returns a diagnostics dictionary along with the
                filtered signal.

        Returns:
            See :func:`savitzky_golay`.
        """
        return savitzky_golay(
            y,
            self.x,
            window_size=self.config.window_size,
            derivative=self.config.derivative,
            polynomial=self.config.polynomial,
            diagnostics=diagnostics,
        )
