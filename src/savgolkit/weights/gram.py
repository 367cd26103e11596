"""Gram polynomials and their derivatives.

The Gram polynomials are the discrete orthogonal polynomials on the
``2m + 1`` equally spaced points ``-m, ..., m``. They are evaluated with
the three-term recurrence of P. A. Gorry, *General least-squares smoothing
and differentiation by the convolution (Savitzky-Golay) method*,
Analytical Chemistry, vol. 62, No. 6, pp. 570–573, 1990::

    G(i, m, k, s) = A * (i * G(i, m, k-1, s) + s * G(i, m, k-1, s-1))
                    - B * G(i, m, k-2, s)

with ``A = (4k - 2) / (k (2m - k + 1))`` and
``B = (k - 1)(2m + k) / (k (2m - k + 1))``.
"""

from __future__ import annotations

from functools import lru_cache

__all__ = ["gram_polynomial"]

#: Number of memoized Gram polynomial values kept across calls.
GRAM_CACHE_SIZE = 4096


@lru_cache(maxsize=GRAM_CACHE_SIZE)
def gram_polynomial(i: int, m: int, k: int, s: int) -> float:
    """Evaluates the ``s``-th derivative of the Gram polynomial of order ``k``.

    Args:
        i: The offset from the window center at which the polynomial is
            evaluated, in ``[-m, m]``.
        m: The half-width of the window.
        k: The order of the polynomial. Negative orders evaluate to zero.
        s: The derivative order (``0`` evaluates the polynomial itself).

    Returns:
        The value of the ``s``-th derivative at ``i``.
    """
    if k < 0:
        return 0.0
    if k == 0:
        return 1.0 if s == 0 else 0.0

    denom = k * (2 * m - k + 1)
    a = (4 * k - 2) / denom
    b = ((k - 1) * (2 * m + k)) / denom

    value = i * gram_polynomial(i, m, k - 1, s)
    # The derivative term vanishes for s == 0.
    if s > 0:
        value += s * gram_polynomial(i, m, k - 1, s - 1)
    return a * value - b * gram_polynomial(i, m, k - 2, s)
