"""Savitzky-Golay filter and its helpers."""

from savgolkit.filter.savgol_config import SavGolConfig
from savgolkit.filter.savitzky_golay import SavitzkyGolayFilter, savitzky_golay

__all__ = ["SavGolConfig", "SavitzkyGolayFilter", "savitzky_golay"]
