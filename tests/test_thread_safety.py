"""Concurrent use of the Savitzky-Golay filter."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from savgolkit import savitzky_golay
from savgolkit.weights.weight_matrix import weight_matrix


def _run(args):
    y, window_size, polynomial, derivative = args
    return savitzky_golay(
        y, 0.1, window_size=window_size, polynomial=polynomial, derivative=derivative
    )


def test_concurrent_calls_match_serial_results(extra_threads_ok, rng):
    """Tests that threads sharing the weight cache get the serial results."""
    if not extra_threads_ok:
        pytest.skip("cannot spawn threads")

    weight_matrix.cache_clear()
    jobs = [
        (rng.normal(size=64), window_size, polynomial, derivative)
        for window_size in (5, 7, 9, 13)
        for polynomial in (2, 3, 4)
        for derivative in (0, 1, 2)
    ] * 3

    serial = [_run(job) for job in jobs]
    weight_matrix.cache_clear()
    with ThreadPoolExecutor(max_workers=8) as ex:
        parallel = list(ex.map(_run, jobs))

    for a, b in zip(serial, parallel):
        np.testing.assert_array_equal(a, b)


def test_concurrent_cache_readers_share_one_matrix(extra_threads_ok):
    """Tests that every thread observes the same complete read-only matrix."""
    if not extra_threads_ok:
        pytest.skip("cannot spawn threads")

    weight_matrix.cache_clear()
    with ThreadPoolExecutor(max_workers=8) as ex:
        results = list(ex.map(lambda _: weight_matrix(15, 4, 1), range(32)))

    reference = results[-1]
    for arr in results:
        assert not arr.flags.writeable
        np.testing.assert_array_equal(arr, reference)
