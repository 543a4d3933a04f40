"""
Moment statistics module.

Provides the sample moments used by every frequency distribution
(mean, standard deviation, skewness), plotting positions, and a few
descriptive helpers for annual rainfall series.
"""

import numpy as np
from typing import Sequence, Tuple
from dataclasses import dataclass


# Bias constant b in (rank - b) / (n + 1 - 2b)
PLOTTING_POSITIONS = {
    'hazen': 0.5,
    'chegodayev': 0.3,
    'weibull': 0.0,
    'blom': 3.0 / 8.0,
    'tukey': 1.0 / 3.0,
    'gringorten': 0.44,
}


@dataclass(frozen=True)
class MomentSummary:
    """Moments of a (possibly log-transformed) sample."""
    mean: float = 0.0
    std: float = 0.0
    skew: float = 0.0
    min: float = 0.0
    max: float = 0.0
    n: int = 0
    cv: float = 0.0


def compute_statistics(sample: Sequence[float]) -> MomentSummary:
    """
    Compute the moment summary of a sample.

    Parameters
    ----------
    sample : array-like
        Observations. Not modified.

    Returns
    -------
    MomentSummary
        All fields are 0 for an empty sample.

    Notes
    -----
    Standard deviation uses the unbiased (n-1) estimator. Skewness is the
    adjusted third-moment estimator:

        Cs = sqrt(n(n-1)) / (n-2) * m3 / m2**1.5

    where m2 and m3 are the biased central moments. Cs is 0 when n <= 2 or
    m2 == 0. A sample of identical values has mean equal to that value and
    std = Cs = 0 exactly.
    """
    x = np.sort(np.asarray(sample, dtype=float))
    n = len(x)

    if n == 0:
        return MomentSummary()

    # Identical values: np.mean can round away from the value and leave
    # spurious spread and skew
    if x[0] == x[-1]:
        return MomentSummary(mean=float(x[0]), min=float(x[0]), max=float(x[0]), n=n)

    mean = float(np.mean(x))
    dev = x - mean
    sum_sq = float(np.sum(dev ** 2))
    sum_cube = float(np.sum(dev ** 3))

    std = float(np.sqrt(sum_sq / (n - 1))) if n > 1 else 0.0

    m2 = sum_sq / n
    m3 = sum_cube / n
    if n > 2 and m2 > 0:
        skew = np.sqrt(n * (n - 1)) / (n - 2) * (m3 / m2 ** 1.5)
    else:
        skew = 0.0

    return MomentSummary(
        mean=mean,
        std=std,
        skew=float(skew),
        min=float(x[0]),
        max=float(x[-1]),
        n=n,
        cv=std / mean if mean != 0 else 0.0,
    )


def plotting_position(rank: int, n: int, method: str = 'weibull') -> float:
    """
    Empirical probability of the rank-th ordered observation.

    Parameters
    ----------
    rank : int
        1-based rank (rank 1 = largest value for exceedance plots)
    n : int
        Sample size
    method : str
        One of 'hazen', 'chegodayev', 'weibull', 'blom', 'tukey',
        'gringorten'

    Returns
    -------
    float
        (rank - b) / (n + 1 - 2b)
    """
    key = method.lower()
    if key not in PLOTTING_POSITIONS:
        raise ValueError(f"Unknown plotting position method: {method}")
    b = PLOTTING_POSITIONS[key]
    return (rank - b) / (n + 1.0 - 2.0 * b)


def find_tau(sample: Sequence[float]) -> float:
    """
    Lower bound (tau) of the three-parameter log-normal distribution.

    Uses the quantile estimator

        tau = (Xmax * Xmin - Xmedian**2) / (Xmax + Xmin - 2 * Xmedian)

    and returns 0 when the denominator is not positive (negatively skewed
    sample) or when fewer than three values are given. The estimate is
    reported only; frequency estimates keep tau = 0.
    """
    x = np.sort(np.asarray(sample, dtype=float))
    n = len(x)
    if n < 3:
        return 0.0

    k = n // 2
    median = x[k] if n % 2 else (x[k - 1] + x[k]) / 2

    div = x[-1] + x[0] - 2 * median
    if div > 0:
        return float((x[-1] * x[0] - median ** 2) / div)
    return 0.0


def linear_trend(x: Sequence[float], y: Sequence[float]) -> Tuple[float, float, float]:
    """
    Least-squares trend line of y on x.

    Returns
    -------
    tuple
        (slope, intercept, correlation). Correlation is NaN when either
        series has zero variance.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    if len(x) < 2:
        raise ValueError("Need at least 2 points to fit a trend line")

    if np.ptp(x) == 0:
        raise ValueError("x values must not all be equal")

    slope, intercept = np.polyfit(x, y, 1)
    cor = np.corrcoef(x, y)[0, 1] if np.ptp(y) > 0 else np.nan
    return float(slope), float(intercept), float(cor)
