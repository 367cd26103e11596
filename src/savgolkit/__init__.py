"""Provides the SavGolKit Savitzky-Golay filter."""

from importlib.metadata import PackageNotFoundError, version

from savgolkit.filter.savgol_config import SavGolConfig
from savgolkit.filter.savitzky_golay import SavitzkyGolayFilter, savitzky_golay
from savgolkit.weights.weight_matrix import build_weight_matrix, weight_matrix

try:
    __version__ = version("savgolkit")
except PackageNotFoundError:
    pass

__all__ = [
    "SavGolConfig",
    "SavitzkyGolayFilter",
    "savitzky_golay",
    "build_weight_matrix",
    "weight_matrix",
]
