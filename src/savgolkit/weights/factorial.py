"""Generalized factorial used to normalize the Gram polynomial weights."""

from __future__ import annotations

import math

__all__ = ["generalized_factorial"]


def generalized_factorial(a: int, b: int) -> int:
    """Computes the falling factorial ``a * (a - 1) * ... * (a - b + 1)``.

    Args:
        a: The starting integer (must be non-negative).
        b: The number of factors (must be non-negative).

    Returns:
        The product of the ``b`` integers ending at ``a``. If ``a < b`` or
        ``b == 0`` the empty product ``1`` is returned.
    """
    if a < b:
        return 1
    return math.prod(range(a - b + 1, a + 1))
