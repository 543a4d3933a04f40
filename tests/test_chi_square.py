"""
Tests for the chi-square goodness-of-fit test.
"""
import math
import pytest
import numpy as np
from rainfreq.analysis import (
    Distribution,
    ChiSquareTest,
    sturges_interval_count,
    compute_statistics,
    standard_normal_inverse,
    gumbel_reduced_variate,
    pearson3_factor,
)
from rainfreq.analysis.chi_square import critical_value, degrees_of_freedom
from rainfreq.exceptions import EmptyInputError

@pytest.mark.parametrize("n, k", [(1, 1), (10, 4), (12, 5), (100, 8)])
def test_sturges_interval_count(n, k):
    assert sturges_interval_count(n) == k

def test_sturges_needs_data():
    with pytest.raises(EmptyInputError):
        sturges_interval_count(0)

def test_degrees_of_freedom():
    assert degrees_of_freedom(Distribution.NORMAL, 5) == 2
    assert degrees_of_freedom(Distribution.LOG_PEARSON_III, 5) == 1
    # Never below one
    assert degrees_of_freedom(Distribution.PEARSON_III, 3) == 1

def test_critical_value():
    assert critical_value(1, 2) == 3.841
    assert critical_value(20, 4) == 37.6
    assert math.isinf(critical_value(21, 2))

def test_lp3_uses_one_degree_of_freedom(annual_maxima):
    result = ChiSquareTest().run(Distribution.LOG_PEARSON_III, annual_maxima, 2)
    assert result.interval_count == 5
    assert result.degrees_of_freedom == 1
    assert result.critical_statistic == 3.841
    assert result.confidence_level == "95%"

def test_normal_result(annual_maxima):
    result = ChiSquareTest().run(Distribution.NORMAL, annual_maxima, 2)
    assert result.degrees_of_freedom == 2
    assert result.critical_statistic == 5.991
    assert result.observed.sum() == len(annual_maxima)
    np.testing.assert_allclose(result.expected, [12 / 5] * 5)
    expected_stat = np.sum((result.observed - 2.4) ** 2 / 2.4)
    assert result.observed_statistic == pytest.approx(expected_stat)
    assert result.fitted == (result.observed_statistic < 5.991)

def test_class_edges_are_contiguous(annual_maxima):
    result = ChiSquareTest().run(Distribution.EXTREME_VALUE_I, annual_maxima)
    np.testing.assert_allclose(result.low[1:], result.high[:-1])
    assert result.low[0] == pytest.approx(min(annual_maxima) - 2)
    assert result.high[-1] == pytest.approx(max(annual_maxima) + 2)
    assert np.all(np.diff(result.high) > 0)

def test_log_distribution_edges_in_log_scale(annual_maxima):
    result = ChiSquareTest().run(Distribution.LOG_NORMAL, annual_maxima)
    assert result.high[-1] == pytest.approx(np.log10(max(annual_maxima)) + 2)
    assert result.observed.sum() == len(annual_maxima)

def test_values_on_edges_are_not_counted():
    """Counting uses strict inequalities on both sides."""
    result = ChiSquareTest().run(Distribution.NORMAL, [1.0, 2.0, 3.0], interval_count=2)
    np.testing.assert_allclose(result.high[0], 2.0)
    assert list(result.observed) == [1, 1]

def test_large_interval_count_has_infinite_critical_value(annual_maxima):
    result = ChiSquareTest().run(Distribution.NORMAL, annual_maxima, interval_count=30)
    assert result.degrees_of_freedom == 27
    assert math.isinf(result.critical_statistic)
    assert result.fitted

def test_invalid_confidence_index_is_soft(annual_maxima):
    """An invalid index yields an unfitted result instead of raising."""
    result = ChiSquareTest().run(Distribution.NORMAL, annual_maxima, confidence_index=7)
    assert not result.fitted
    assert result.interval_count == 0
    assert "invalid" in result.conclusion
    assert result.conclusion in result.report()

def test_invalid_inputs(annual_maxima):
    with pytest.raises(EmptyInputError):
        ChiSquareTest().run(Distribution.NORMAL, [])
    with pytest.raises(ValueError):
        ChiSquareTest().run(Distribution.NORMAL, annual_maxima, interval_count=0)

def test_report(annual_maxima):
    result = ChiSquareTest().run("lp3", annual_maxima, 2)
    text = result.report()
    assert text.startswith("CHI-SQUARE TEST")
    assert "Ho: The series is Log-Pearson Type III Distribution." in text
    assert "Critical Chi2 value (95%) = 3.841" in text
    assert f"* Goodness of fit: {result.fitted}" in text
    assert len(result.to_frame()) == 5

@pytest.mark.parametrize("k", [3, 6, 7])
def test_normal_edges_use_cumulative_probability(annual_maxima, k):
    """Edges are mean + z(i/k) * std with z taken at i/k itself."""
    result = ChiSquareTest().run(Distribution.NORMAL, annual_maxima, interval_count=k)
    s = compute_statistics(annual_maxima)
    for i in range(1, k):
        assert result.high[i - 1] == s.mean + standard_normal_inverse(i / k) * s.std

def test_pearson_and_gumbel_edges(annual_maxima):
    s = compute_statistics(annual_maxima)

    result = ChiSquareTest().run(Distribution.PEARSON_III, annual_maxima, interval_count=3)
    kt = pearson3_factor(standard_normal_inverse(1 / 3), s.skew)
    assert result.high[0] == s.mean + s.std * kt

    result = ChiSquareTest().run(Distribution.EXTREME_VALUE_I, annual_maxima, interval_count=3)
    alpha = 0.7797 * s.std
    mode = s.mean - 0.5772 * alpha
    assert result.high[0] == pytest.approx(mode + alpha * gumbel_reduced_variate(1 - 1 / 3))

def test_non_integer_confidence_index_is_soft(annual_maxima):
    result = ChiSquareTest().run(Distribution.NORMAL, annual_maxima, confidence_index=2.5)
    assert not result.fitted
    assert result.interval_count == 0
    assert result.confidence_level == "2.5"
    assert "invalid" in result.conclusion
