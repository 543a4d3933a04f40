"""
Rainfall frequency analysis module.

Provides return-period estimates for the five moment-fitted distributions,
frequency tables across return periods, and the reverse lookup of the
return-period class of an observed magnitude.
"""

import math
import pandas as pd
from typing import Dict, List, Optional, Sequence, Union
from dataclasses import dataclass

from .distributions import Distribution, prepare_sample
from .frequency_factor import frequency_factor, magnitude, to_original_scale
from .statistics import compute_statistics
from ..exceptions import EmptyInputError, InvalidReturnPeriodError


DEFAULT_RETURN_PERIODS = (1.11, 2, 5, 10, 20, 25, 50, 100, 200, 500)


@dataclass
class FrequencyResult:
    """Estimate for a single distribution and return period."""
    distribution: Distribution
    return_period: float
    kt: float
    qest: float


def estimate(
    distribution: Union[Distribution, int, str],
    sample: Sequence[float],
    return_period: float
) -> FrequencyResult:
    """
    Estimate the T-year magnitude from a sample of annual maxima.

    Parameters
    ----------
    distribution : Distribution, int or str
        Distribution to fit by moment matching
    sample : array-like
        Annual maximum series (original units)
    return_period : float
        Return period T in years (T >= 1)

    Returns
    -------
    FrequencyResult
        Frequency factor Kt and estimate Qest. Qest is always in the
        original units, also for the log-space distributions.

    Notes
    -----
    With px = 1/T and z the standard normal variate for 1 - px:

    - Normal:          Kt = z,                 Q = mean + Kt * std
    - Log-Normal:      as Normal on log10(x),  Q = 10**Q_log
    - Pearson III:     Kt = W-H(z, Cs),        Q = mean + std * Kt + tau
    - Log-Pearson III: as Pearson III on log10(x), then 10**
    - Extreme Value I: alpha = 0.7797 * std, u = mean - 0.5772 * alpha,
                       Kt = -ln(-ln(1 - px)),  Q = u + alpha * Kt

    tau is fixed at 0: the three-parameter shift is not fitted.
    """
    distribution = Distribution.parse(distribution)
    check_return_period(return_period)

    x = prepare_sample(distribution, sample)
    if len(x) == 0:
        raise EmptyInputError("Cannot estimate a frequency from an empty sample")

    moments = compute_statistics(x)

    px = 1.0 / return_period
    kt = frequency_factor(distribution, px, moments.skew)
    qest = to_original_scale(distribution, magnitude(distribution, moments, kt))

    return FrequencyResult(
        distribution=distribution,
        return_period=return_period,
        kt=kt,
        qest=qest,
    )


def check_return_period(return_period: float) -> None:
    """Raise InvalidReturnPeriodError unless T is a finite number >= 1."""
    try:
        valid = math.isfinite(return_period) and return_period >= 1
    except TypeError:
        valid = False
    if not valid:
        raise InvalidReturnPeriodError(
            f"Return period must be a finite number >= 1, got {return_period!r}"
        )


def frequency_table(
    sample: Sequence[float],
    return_periods: Sequence[float] = DEFAULT_RETURN_PERIODS,
    distributions: Optional[Sequence[Union[Distribution, int, str]]] = None
) -> pd.DataFrame:
    """
    Estimates for every distribution and return period.

    Parameters
    ----------
    sample : array-like
        Annual maximum series
    return_periods : sequence of float
        Return periods (columns)
    distributions : sequence, optional
        Distributions (rows). Defaults to all five.

    Returns
    -------
    pandas.DataFrame
        Index: distribution short name; columns: return periods;
        values: Qest in original units
    """
    if distributions is None:
        distributions = list(Distribution)
    distributions = [Distribution.parse(d) for d in distributions]

    rows = {}
    for dist in distributions:
        rows[dist.short_name] = [estimate(dist, sample, T).qest for T in return_periods]

    table = pd.DataFrame.from_dict(rows, orient='index', columns=list(return_periods))
    table.index.name = 'distribution'
    table.columns.name = 'return_period'
    return table


def return_period_classes(return_periods: Sequence[float] = DEFAULT_RETURN_PERIODS) -> List[str]:
    """
    Class labels between consecutive return periods.

    For (1.11, 2, 5, ...) this is ["<1.11", "1.11~2", "2~5", ..., ">500"].
    """
    labels = [f"<{return_periods[0]:g}"]
    for lo, hi in zip(return_periods[:-1], return_periods[1:]):
        labels.append(f"{lo:g}~{hi:g}")
    labels.append(f">{return_periods[-1]:g}")
    return labels


def find_return_period(
    value: float,
    estimates: Sequence[float],
    return_periods: Sequence[float] = DEFAULT_RETURN_PERIODS
) -> str:
    """
    Return-period class of a magnitude given estimates for each period.

    Parameters
    ----------
    value : float
        Observed magnitude
    estimates : sequence of float
        Estimates ordered like ``return_periods``
    return_periods : sequence of float
        Return periods the estimates belong to

    Returns
    -------
    str
        Class label such as "10~20"
    """
    labels = return_period_classes(return_periods)
    q = list(estimates)
    n = len(q)
    if n != len(return_periods):
        raise ValueError("estimates and return_periods must have the same length")

    if value < q[0]:
        return labels[0]
    if value > q[n - 1]:
        return labels[n]

    for i in range(1, n - 1):
        if value < q[i]:
            return labels[i]
    return labels[n - 1]


def classify_return_periods(
    value: float,
    sample: Sequence[float],
    return_periods: Sequence[float] = DEFAULT_RETURN_PERIODS,
    distributions: Optional[Sequence[Union[Distribution, int, str]]] = None
) -> Dict[Distribution, str]:
    """
    Return-period class of a magnitude under each distribution.

    Returns
    -------
    dict
        {Distribution: class label}
    """
    table = frequency_table(sample, return_periods, distributions)
    results = {}
    for name, row in table.iterrows():
        dist = Distribution.parse(name)
        results[dist] = find_return_period(value, row.values, return_periods)
    return results
