"""
Inverse-CDF approximations for the standard normal and Gumbel variates.
"""

import math

import numpy as np


# Abramowitz & Stegun 26.2.23 coefficients
_C0 = 2.515517
_C1 = 0.802853
_C2 = 0.010328
_D1 = 1.432788
_D2 = 0.189269
_D3 = 0.001308


def standard_normal_inverse(p: float) -> float:
    """
    Standard normal quantile z such that P(Z <= z) = p.

    Parameters
    ----------
    p : float
        Cumulative (non-exceedance) probability

    Returns
    -------
    float
        z, or NaN when p is outside the open interval (0, 1)

    Notes
    -----
    Rational approximation (Abramowitz & Stegun 26.2.23) with

        t = sqrt(-2 ln(1 - p))
        z = t - (c0 + c1 t + c2 t^2) / (1 + d1 t + d2 t^2 + d3 t^3)

    for p >= 0.5, and symmetry for p < 0.5. Absolute error is below
    about 4.5e-4, which is adequate for engineering frequency factors.
    """
    if not 0.0 < p < 1.0:
        return math.nan
    if p == 0.5:
        return 0.0
    if p < 0.5:
        return -standard_normal_inverse(1.0 - p)

    t = math.sqrt(-2.0 * math.log(1.0 - p))
    numerator = _C0 + _C1 * t + _C2 * t * t
    denominator = 1.0 + _D1 * t + _D2 * t * t + _D3 * t * t * t
    return t - numerator / denominator


def gumbel_reduced_variate(px: float) -> float:
    """
    Gumbel (Extreme Value Type I) reduced variate.

    Parameters
    ----------
    px : float
        Exceedance probability (1/T)

    Returns
    -------
    float
        y = -ln(-ln(1 - px)). Degenerate probabilities give inf or NaN
        rather than raising.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(-np.log(-np.log(1.0 - px)))
