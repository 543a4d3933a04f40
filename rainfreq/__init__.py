"""
RainFreq: Rainfall Frequency Analysis

Moment-fitted frequency analysis of annual maximum rainfall for five
standard distributions (Normal, Log-Normal, Pearson III, Log-Pearson III,
Extreme Value I), with Kolmogorov-Smirnov band and chi-square
goodness-of-fit tests.
"""

__version__ = "1.0.0"

from .config import RainFreqConfig
from .analysis import Distribution, estimate, KSTest, ChiSquareTest

__all__ = [
    "RainFreqConfig",
    "Distribution",
    "estimate",
    "KSTest",
    "ChiSquareTest",
    "__version__",
]
