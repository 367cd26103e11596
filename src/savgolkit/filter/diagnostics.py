"""Diagnostics for the Savitzky-Golay filter."""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from savgolkit.utils.types import FloatArray

__all__ = ["make_diagnostics"]


def make_diagnostics(
    y_filtered: FloatArray,
    weights: FloatArray,
    divisor: float | FloatArray,
    window_size: int,
    polynomial: int,
    derivative: int,
) -> Dict[str, Any]:
    """Builds diagnostics dictionary.

    Args:
        y_filtered:
            The filter output (shape (n_samples,)).
        weights:
            The convolution weight matrix (shape (window_size, window_size)).
        divisor:
            The derivative divisor, a float for constant spacing or an
            array of shape (n_samples,) for explicit coordinates.
        window_size:
            The number of samples in the window.
        polynomial:
            The degree of the local polynomial.
        derivative:
            The derivative order.

    Returns:
        A diagnostics dictionary.
    """
    n_samples = int(y_filtered.shape[0])
    half = window_size // 2
    constant = np.ndim(divisor) == 0
    ok = bool(np.all(np.isfinite(y_filtered)))

    diag: Dict[str, Any] = {
        "ok": ok,
        "window_size": int(window_size),
        "half": int(half),
        "polynomial": int(polynomial),
        "derivative": int(derivative),
        "n_samples": n_samples,
        "spacing": "constant" if constant else "irregular",
        "divisor": float(divisor) if constant else np.asarray(divisor).tolist(),
        "boundary_left": list(range(half)),
        "boundary_right": list(range(n_samples - half, n_samples)),
        "center_row": weights[half].tolist(),
    }

    if not ok:
        diag["note"] = (
            "Some outputs are not finite. With explicit positions this usually "
            "means repeated coordinates (zero local step) in a derivative run."
        )

    return diag
