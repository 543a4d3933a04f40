"""Analysis modules for RainFreq."""

from .distributions import Distribution, CONFIDENCE_LEVELS, log_transform
from .statistics import (
    MomentSummary,
    compute_statistics,
    plotting_position,
    find_tau,
    linear_trend,
)
from .inverse_cdf import standard_normal_inverse, gumbel_reduced_variate
from .frequency_factor import pearson3_factor, frequency_factor, cumulative_frequency_factor
from .frequency import (
    DEFAULT_RETURN_PERIODS,
    FrequencyResult,
    estimate,
    frequency_table,
    find_return_period,
    classify_return_periods,
)
from .ks_test import KSTest, KSResult
from .chi_square import ChiSquareTest, ChiSquareResult, sturges_interval_count
from .summary import summarize_samples, goodness_of_fit_summary, best_fit

__all__ = [
    "Distribution",
    "CONFIDENCE_LEVELS",
    "log_transform",
    "MomentSummary",
    "compute_statistics",
    "plotting_position",
    "find_tau",
    "linear_trend",
    "standard_normal_inverse",
    "gumbel_reduced_variate",
    "pearson3_factor",
    "frequency_factor",
    "cumulative_frequency_factor",
    "DEFAULT_RETURN_PERIODS",
    "FrequencyResult",
    "estimate",
    "frequency_table",
    "find_return_period",
    "classify_return_periods",
    "KSTest",
    "KSResult",
    "ChiSquareTest",
    "ChiSquareResult",
    "sturges_interval_count",
    "summarize_samples",
    "goodness_of_fit_summary",
    "best_fit",
]
