"""Provides :func:`read_only_array_cache`."""
from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import lru_cache, wraps
from typing import Any

import numpy as np

__all__ = ["read_only_array_cache"]


def read_only_array_cache(
    *,
    maxsize: int | None = 128,
    convert: Callable[[Any], Any] | None = None,
) -> Callable[[Callable[..., np.ndarray]], Callable[..., np.ndarray]]:
    """Creates a cache for functions that build arrays from hashable arguments.

    The cached arrays are shared between all callers, so they are flagged
    read-only before they are stored. An entry only becomes visible once the
    wrapped builder has returned, so concurrent callers never see a
    partially built array.

    Positional and keyword calls are bound to the builder's signature
    (defaults applied) before the lookup, so ``f(5, 2)`` and
    ``f(n=5, m=2)`` share one entry.

    Args:
        maxsize: The size of the cache. ``None`` means unbounded.
        convert: Optional function applied to every bound argument before
            the lookup, e.g. :func:`operator.index` to refuse ``5.0`` where
            ``5`` is meant. Errors it raises propagate to the caller.

    Returns:
        A decorator that wraps an array builder in an LRU cache.
    """
    def decorator(
        function: Callable[..., np.ndarray]
    ) -> Callable[..., np.ndarray]:
        signature = inspect.signature(function)

        @lru_cache(maxsize=maxsize)
        def cached_wrapper(*args: Any) -> np.ndarray:
            arr = np.array(function(*args), dtype=float)
            arr.setflags(write=False)
            return arr

        @wraps(function)
        def wrapped(*args: Any, **kwargs: Any) -> np.ndarray:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            args = bound.args
            if convert is not None:
                args = tuple(convert(arg) for arg in args)
            return cached_wrapper(*args)

        # Ensure that the lru_cache attributes are preserved.
        wrapped.cache_info = cached_wrapper.cache_info
        wrapped.cache_clear = cached_wrapper.cache_clear

        return wrapped

    return decorator
