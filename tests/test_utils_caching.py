"""Tests for savgolkit.utils.caching."""

from __future__ import annotations

import operator

import numpy as np
import pytest

from savgolkit.utils.caching import read_only_array_cache


def test_read_only_array_cache_has_cache_api():
    """Tests that the wrapper should preserve lru_cache attributes."""
    @read_only_array_cache(maxsize=16)
    def build(n: int) -> np.ndarray:
        """Builds an identity matrix."""
        return np.eye(n)

    assert callable(build.cache_info)
    assert callable(build.cache_clear)
    assert build.cache_info().maxsize == 16
    assert build.__doc__ == "Builds an identity matrix."


def test_read_only_array_cache_builds_once_per_key():
    """Tests that identical arguments reuse the stored array."""
    calls = {"n": 0}

    @read_only_array_cache()
    def build(n: int, fill: int) -> np.ndarray:
        """Builds a filled vector and counts the calls."""
        calls["n"] += 1
        return np.full(n, fill)

    a = build(3, 2)
    b = build(3, 2)
    c = build(4, 2)

    assert calls["n"] == 2
    assert a is b
    assert c.shape == (4,)
    assert a.dtype == np.float64

    build.cache_clear()
    build(3, 2)
    assert calls["n"] == 3


def test_read_only_array_cache_results_are_read_only():
    """Tests that cached arrays cannot be modified in place."""
    @read_only_array_cache()
    def build(n: int) -> np.ndarray:
        return np.zeros(n)

    arr = build(5)
    assert not arr.flags.writeable
    with pytest.raises(ValueError):
        arr[0] = 1.0


def test_read_only_array_cache_does_not_store_failures():
    """Tests that exceptions propagate and are not cached."""
    calls = {"n": 0}

    @read_only_array_cache()
    def build(n: int) -> np.ndarray:
        calls["n"] += 1
        if n < 0:
            raise ValueError("negative")
        return np.zeros(n)

    for _ in range(2):
        with pytest.raises(ValueError):
            build(-1)
    assert calls["n"] == 2


def test_read_only_array_cache_binds_keywords_and_defaults():
    """Tests that positional, keyword and defaulted calls share one entry."""
    calls = {"n": 0}

    @read_only_array_cache()
    def build(n: int, fill: int = 1) -> np.ndarray:
        calls["n"] += 1
        return np.full(n, fill)

    a = build(3)
    b = build(3, 1)
    c = build(n=3, fill=1)
    d = build(fill=1, n=3)

    assert a is b is c is d
    assert calls["n"] == 1
    with pytest.raises(TypeError):
        build(3, 1, 2)


def test_read_only_array_cache_converts_arguments_before_lookup():
    """Tests that the convert hook runs before the cache is consulted."""
    @read_only_array_cache(convert=operator.index)
    def build(n: int) -> np.ndarray:
        return np.zeros(n)

    build(4)
    with pytest.raises(TypeError):
        build(4.0)
    assert build(np.int64(4)) is build(4)
