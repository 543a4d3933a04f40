"""
Tests for moment statistics and plotting positions.
"""
import pytest
import numpy as np
from rainfreq.analysis import (
    compute_statistics,
    plotting_position,
    find_tau,
    linear_trend,
    log_transform,
)

@pytest.mark.parametrize("value", [42.0, 123.4, 7.77, 0.3])
def test_identical_values(value):
    """Identical values have no spread and no skew, whatever their rounding."""
    s = compute_statistics([value] * 10)
    assert s.mean == value
    assert s.std == 0
    assert s.skew == 0
    assert s.cv == 0
    assert s.min == s.max == value
    assert s.n == 10

def test_arithmetic_sequence_is_symmetric():
    s = compute_statistics(np.arange(1, 21))
    assert s.skew == pytest.approx(0, abs=1e-12)
    assert s.mean == pytest.approx(10.5)

def test_single_value():
    s = compute_statistics([7.5])
    assert s.n == 1
    assert s.std == 0
    assert s.skew == 0
    assert s.min == s.max == 7.5

def test_two_values_have_no_skew():
    s = compute_statistics([1.0, 3.0])
    assert s.std == pytest.approx(np.sqrt(2))
    assert s.skew == 0

def test_empty_sample_returns_zeros():
    s = compute_statistics([])
    assert (s.n, s.mean, s.std, s.skew, s.min, s.max, s.cv) == (0, 0, 0, 0, 0, 0, 0)

def test_known_moments(annual_maxima):
    """Compare with a direct evaluation of the adjusted skew estimator."""
    x = np.array(annual_maxima, dtype=float)
    n = len(x)
    d = x - x.mean()
    m2 = np.mean(d ** 2)
    m3 = np.mean(d ** 3)
    expected_skew = np.sqrt(n * (n - 1)) / (n - 2) * m3 / m2 ** 1.5

    s = compute_statistics(annual_maxima)
    assert s.mean == pytest.approx(x.mean())
    assert s.std == pytest.approx(np.std(x, ddof=1))
    assert s.skew == pytest.approx(expected_skew)
    assert s.cv == pytest.approx(s.std / s.mean)
    assert (s.min, s.max) == (120, 210)

def test_right_skewed_sample():
    assert compute_statistics([1, 2, 10]).skew > 0
    assert compute_statistics([-10, -2, -1]).skew < 0

def test_input_not_mutated(annual_maxima):
    original = list(annual_maxima)
    compute_statistics(annual_maxima)
    assert annual_maxima == original

@pytest.mark.parametrize(
    "method, expected",
    [
        ("weibull", 1 / 11),
        ("hazen", 0.5 / 10),
        ("gringorten", 0.56 / 10.12),
        ("Blom", (1 - 3 / 8) / (11 - 0.75)),
    ],
)
def test_plotting_position(method, expected):
    assert plotting_position(1, 10, method) == pytest.approx(expected)

def test_plotting_position_unknown_method():
    with pytest.raises(ValueError):
        plotting_position(1, 10, "california")

def test_find_tau():
    # xmax + xmin - 2 * median > 0
    assert find_tau([1, 2, 10]) == pytest.approx((10 * 1 - 4) / (11 - 4))
    # Even sample uses the mean of the two middle values
    assert find_tau([1, 2, 4, 20]) == pytest.approx((20 - 9) / (21 - 6))
    # Negatively skewed or too short samples give 0
    assert find_tau([1, 9, 10]) == 0
    assert find_tau([1, 2]) == 0

def test_linear_trend():
    slope, intercept, cor = linear_trend([2000, 2001, 2002, 2003], [1, 3, 5, 7])
    assert slope == pytest.approx(2)
    assert intercept == pytest.approx(1 - 2 * 2000)
    assert cor == pytest.approx(1)

def test_linear_trend_flat_series():
    slope, intercept, cor = linear_trend([1, 2, 3], [5, 5, 5])
    assert slope == pytest.approx(0, abs=1e-9)
    assert intercept == pytest.approx(5)
    assert np.isnan(cor)

def test_linear_trend_matches_polyfit():
    x = [1990, 1991, 1993, 1996, 2000]
    y = [120.0, 135.5, 110.2, 160.0, 150.3]
    slope, intercept, cor = linear_trend(x, y)
    expected_slope, expected_intercept = np.polyfit(x, y, 1)
    assert slope == pytest.approx(expected_slope)
    assert intercept == pytest.approx(expected_intercept)
    assert cor == pytest.approx(np.corrcoef(x, y)[0, 1])
    assert -1 <= cor <= 1

def test_linear_trend_invalid_input():
    with pytest.raises(ValueError):
        linear_trend([1, 2], [1, 2, 3])
    with pytest.raises(ValueError):
        linear_trend([1], [1])
    with pytest.raises(ValueError):
        linear_trend([4, 4, 4], [1, 2, 3])

def test_log_transform_clamps_non_positive():
    out = log_transform([100, 0, -5, 1e-7, 10])
    np.testing.assert_allclose(out, [2, 0, 0, 0, 1])
