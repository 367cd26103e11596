"""Unit tests for SavGolConfig."""

from __future__ import annotations

import pytest

from savgolkit import SavitzkyGolayFilter
from savgolkit.filter.savgol_config import (
    DEFAULT_DERIVATIVE,
    DEFAULT_POLYNOMIAL,
    DEFAULT_WINDOW_SIZE,
    POLYNOMIAL_ADVISORY_DEGREE,
    SavGolConfig,
)


def test_savgol_config_defaults():
    """Tests that default constructor should set documented defaults."""
    cfg = SavGolConfig()

    assert cfg.window_size == DEFAULT_WINDOW_SIZE == 9
    assert cfg.derivative == DEFAULT_DERIVATIVE == 0
    assert cfg.polynomial == DEFAULT_POLYNOMIAL == 3
    assert POLYNOMIAL_ADVISORY_DEGREE == 6


def test_savgol_config_stores_values_and_repr():
    """Tests that explicit values are kept as given."""
    cfg = SavGolConfig(window_size=11, derivative=2, polynomial=4)
    assert (cfg.window_size, cfg.derivative, cfg.polynomial) == (11, 2, 4)
    assert repr(cfg) == "SavGolConfig(window_size=11, derivative=2, polynomial=4)"


def test_savgol_config_is_validated_when_applied():
    """Tests that an invalid config only fails once the filter runs."""
    cfg = SavGolConfig(window_size=4)
    sg = SavitzkyGolayFilter(1.0, cfg)
    with pytest.raises(ValueError, match="Invalid window size"):
        sg.apply([1.0, 2.0, 3.0, 4.0, 5.0])
