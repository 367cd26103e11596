"""Configuration for the Savitzky-Golay filter.

This config holds the options :class:`SavitzkyGolayFilter` applies to every
signal. The values are checked when the filter is applied, so an invalid
configuration fails with the same errors as :func:`savitzky_golay`.
"""

from __future__ import annotations

#: Default number of samples in the filter window.
DEFAULT_WINDOW_SIZE = 9
#: Default derivative order (``0`` smooths the signal).
DEFAULT_DERIVATIVE = 0
#: Default degree of the local polynomial.
DEFAULT_POLYNOMIAL = 3
#: Polynomial degrees from this value on trigger an oscillation warning.
POLYNOMIAL_ADVISORY_DEGREE = 6


class SavGolConfig:
    """Configuration for the Savitzky-Golay filter."""

    def __init__(
        self,
        window_size: int = DEFAULT_WINDOW_SIZE,
        derivative: int = DEFAULT_DERIVATIVE,
        polynomial: int = DEFAULT_POLYNOMIAL,
    ):
        """Initialize configuration.

        Args:
            window_size:
                Number of samples in each local fit. Must be an odd integer
                of at least 5 and not larger than the signal.

            derivative:
                Order of the derivative to return. ``0`` returns the
                smoothed signal, ``1`` the first derivative and so on.

            polynomial:
                Degree of the local polynomial. Must be at least 1 and
                smaller than ``window_size``. Degrees of
                :data:`POLYNOMIAL_ADVISORY_DEGREE` and above are allowed but
                emit a warning, as they tend to oscillate.
        """
        self.window_size = window_size
        self.derivative = derivative
        self.polynomial = polynomial

    def __repr__(self) -> str:
        return (
            f"SavGolConfig(window_size={self.window_size!r}, "
            f"derivative={self.derivative!r}, polynomial={self.polynomial!r})"
        )
