"""
Summary tables for reporting.

Aggregates moment statistics and goodness-of-fit results across storm
durations and distributions.
"""

import pandas as pd
from typing import Dict, Optional, Sequence, Union

from .chi_square import ChiSquareTest
from .distributions import Distribution
from .ks_test import KSTest
from .statistics import compute_statistics, find_tau


def summarize_samples(samples: Dict[int, Sequence[float]]) -> pd.DataFrame:
    """
    Descriptive statistics for each storm duration.

    Parameters
    ----------
    samples : dict
        {duration: annual maximum series}

    Returns
    -------
    pandas.DataFrame
        Columns: duration, n, mean, std, cv, skew, min, max, tau
    """
    rows = []
    for duration, sample in samples.items():
        s = compute_statistics(sample)
        rows.append({
            'duration': duration,
            'n': s.n,
            'mean': s.mean,
            'std': s.std,
            'cv': s.cv,
            'skew': s.skew,
            'min': s.min,
            'max': s.max,
            'tau': find_tau(sample),
        })
    return pd.DataFrame(rows)


def goodness_of_fit_summary(
    sample: Sequence[float],
    confidence_index: int = 2,
    distributions: Optional[Sequence[Union[Distribution, int, str]]] = None
) -> pd.DataFrame:
    """
    KS and chi-square verdicts for each distribution.

    Parameters
    ----------
    sample : array-like
        Annual maximum series
    confidence_index : int
        Confidence level index used by both tests (default 95%)
    distributions : sequence, optional
        Defaults to all five

    Returns
    -------
    pandas.DataFrame
        Columns: distribution, label, ks_fitted, ks_ca, chi2_fitted,
        chi2_observed, chi2_critical, sse. Lower SSE means the fitted
        curve is closer to the observations.
    """
    if distributions is None:
        distributions = list(Distribution)

    ks = KSTest(confidence_index)
    chi = ChiSquareTest()

    rows = []
    for dist in (Distribution.parse(d) for d in distributions):
        ks_result = ks.run(dist, sample)
        chi_result = chi.run(dist, sample, confidence_index)
        rows.append({
            'distribution': dist.short_name,
            'label': dist.label,
            'ks_fitted': ks_result.fitted,
            'ks_ca': ks_result.ca,
            'chi2_fitted': chi_result.fitted,
            'chi2_observed': chi_result.observed_statistic,
            'chi2_critical': chi_result.critical_statistic,
            'sse': ks_result.sse,
        })
    return pd.DataFrame(rows)


def best_fit(summary: pd.DataFrame) -> Optional[str]:
    """
    Distribution passing both tests with the lowest SSE.

    Returns None when no distribution passes both tests.
    """
    passing = summary[summary['ks_fitted'] & summary['chi2_fitted']]
    if passing.empty:
        return None
    return passing.loc[passing['sse'].idxmin(), 'distribution']
