"""
Frequency factor module.

Converts exceedance probabilities into distribution-specific frequency
factors (Kt) and frequency factors into magnitudes:

    X_T = mean + Kt * std

This is the single dispatch point over the five distributions; frequency
estimation and both goodness-of-fit tests go through it.
"""

import math

import numpy as np

from .distributions import Distribution
from .inverse_cdf import standard_normal_inverse, gumbel_reduced_variate
from .statistics import MomentSummary
from ..exceptions import UnsupportedDistributionError


# Extreme Value Type I moment-fit constants
GUMBEL_SCALE_FACTOR = 0.7797  # sqrt(6) / pi
EULER_GAMMA = 0.5772


def pearson3_factor(z: float, skew: float) -> float:
    """
    Pearson Type III frequency factor (Wilson-Hilferty approximation).

    Parameters
    ----------
    z : float
        Standard normal variate
    skew : float
        Skew coefficient of the (possibly log-transformed) sample

    Returns
    -------
    float
        Kt, NaN if z is NaN

    Notes
    -----
    With k = Cs / 6:

        Kt = z + (z^2 - 1)k + (1/3)z(z^2 - 6)k^2 - (z^2 - 1)k^3 + z k^4 + (1/3)k^5
    """
    if math.isnan(z):
        return math.nan
    k = skew / 6.0
    z2 = z * z
    k2 = k * k
    return (z + (z2 - 1.0) * k + (1.0 / 3.0) * z * (z2 - 6.0) * k2
            - (z2 - 1.0) * k2 * k + z * k2 * k2 + (1.0 / 3.0) * k2 * k2 * k)


def frequency_factor(distribution: Distribution, px: float, skew: float = 0.0) -> float:
    """
    Frequency factor Kt for an exceedance probability.

    Parameters
    ----------
    distribution : Distribution
    px : float
        Exceedance probability (1/T for a return period T)
    skew : float
        Sample skew, used by the Pearson family only

    Returns
    -------
    float
        Kt; NaN (or inf for Extreme Value I) when px is degenerate
    """
    if distribution in (Distribution.NORMAL, Distribution.LOG_NORMAL):
        return standard_normal_inverse(1.0 - px)
    if distribution in (Distribution.PEARSON_III, Distribution.LOG_PEARSON_III):
        return pearson3_factor(standard_normal_inverse(1.0 - px), skew)
    if distribution == Distribution.EXTREME_VALUE_I:
        return gumbel_reduced_variate(px)
    raise UnsupportedDistributionError(f"Unsupported distribution: {distribution!r}")


def cumulative_frequency_factor(
    distribution: Distribution,
    cumulative: float,
    skew: float = 0.0
) -> float:
    """
    Frequency factor for a cumulative (non-exceedance) probability.

    Same as ``frequency_factor(distribution, 1 - cumulative, skew)`` but the
    normal variate is taken at ``cumulative`` itself, so no rounding is
    introduced by the double complement.
    """
    if distribution in (Distribution.NORMAL, Distribution.LOG_NORMAL):
        return standard_normal_inverse(cumulative)
    if distribution in (Distribution.PEARSON_III, Distribution.LOG_PEARSON_III):
        return pearson3_factor(standard_normal_inverse(cumulative), skew)
    if distribution == Distribution.EXTREME_VALUE_I:
        return gumbel_reduced_variate(1.0 - cumulative)
    raise UnsupportedDistributionError(f"Unsupported distribution: {distribution!r}")


def magnitude(
    distribution: Distribution,
    moments: MomentSummary,
    kt: float,
    tau: float = 0.0
) -> float:
    """
    Magnitude in the analysis scale (log10 for log distributions).

    Parameters
    ----------
    distribution : Distribution
    moments : MomentSummary
        Moments of the (transformed) sample
    kt : float
        Frequency factor
    tau : float
        Location shift for the Pearson family; kept at 0 because the
        three-parameter form is not fitted

    Returns
    -------
    float
    """
    if distribution in (Distribution.NORMAL, Distribution.LOG_NORMAL):
        return moments.mean + kt * moments.std
    if distribution in (Distribution.PEARSON_III, Distribution.LOG_PEARSON_III):
        return moments.mean + moments.std * kt + tau
    if distribution == Distribution.EXTREME_VALUE_I:
        alpha = GUMBEL_SCALE_FACTOR * moments.std
        mode = moments.mean - EULER_GAMMA * alpha
        return mode + alpha * kt
    raise UnsupportedDistributionError(f"Unsupported distribution: {distribution!r}")


def quantile(
    distribution: Distribution,
    moments: MomentSummary,
    px: float
) -> float:
    """Magnitude for exceedance px, NaN when the frequency factor is NaN."""
    kt = frequency_factor(distribution, px, moments.skew)
    if math.isnan(kt):
        return math.nan
    return magnitude(distribution, moments, kt)


def to_original_scale(distribution: Distribution, value: float) -> float:
    """Undo the log10 transform for log-space distributions."""
    if distribution.requires_log:
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.power(10.0, value))
    return value
