"""
Tests for the Kolmogorov-Smirnov band test.
"""
import math
import pytest
import numpy as np
from rainfreq.analysis import Distribution, KSTest, estimate
from rainfreq.analysis.ks_test import critical_band
from rainfreq.exceptions import EmptyInputError, InvalidConfidenceIndexError

def test_critical_band():
    ca = critical_band(0.895, 12)
    root = math.sqrt(12)
    assert ca == pytest.approx(0.895 / (root - 0.01 + 0.85 / root))

def test_invalid_confidence_index():
    with pytest.raises(InvalidConfidenceIndexError):
        KSTest(confidence_index=5)

def test_confidence_level():
    assert KSTest(0).confidence_level == "85%"
    assert KSTest().confidence_level == "95%"
    assert KSTest(4).alpha == 1.035

def test_result_layout(annual_maxima):
    """Observations are sorted descending with Weibull positions."""
    result = KSTest().run(Distribution.NORMAL, annual_maxima)
    n = len(annual_maxima)
    assert list(result.observed) == sorted(annual_maxima, reverse=True)
    np.testing.assert_allclose(result.probability, np.arange(1, n + 1) / (n + 1))
    assert len(result.mark) == n
    assert set(result.mark) <= {"G", "-", "+"}
    assert result.confidence_level == "95%"

def test_estimated_matches_frequency_estimate(annual_maxima):
    """The fitted curve equals the estimate at T = (n + 1) / rank."""
    result = KSTest().run("lp3", annual_maxima)
    n = len(annual_maxima)
    for rank in (1, 6, 12):
        expected = estimate("lp3", annual_maxima, (n + 1) / rank).qest
        assert result.estimated[rank - 1] == pytest.approx(expected)

def test_band_endpoints_outside_unit_interval_are_nan(annual_maxima):
    result = KSTest().run(Distribution.NORMAL, annual_maxima)
    assert np.isnan(result.upper_bound[0])
    assert np.isnan(result.lower_bound[-1])
    # NaN bounds are not violations
    assert result.mark[0] != "+"
    assert result.mark[-1] != "-"

def test_well_behaved_sample_fits(annual_maxima):
    result = KSTest().run(Distribution.NORMAL, annual_maxima)
    assert result.fitted
    assert result.mark == ["G"] * len(annual_maxima)

def test_constant_sample_fits():
    result = KSTest(2).run(Distribution.NORMAL, [100.0] * 10)
    assert result.fitted
    assert result.mark == ["G"] * 10
    assert result.sse == 0

@pytest.mark.parametrize("value", [123.4, 7.77, 0.3])
@pytest.mark.parametrize("dist", list(Distribution))
def test_constant_sample_fits_every_distribution(dist, value):
    """Values that do not average exactly still sit on the fitted curve."""
    result = KSTest(2).run(dist, [value] * 10)
    assert result.mark == ["G"] * 10
    assert result.fitted
    np.testing.assert_allclose(result.estimated, value, rtol=1e-12)

@pytest.mark.parametrize("index", [2.5, "2", True])
def test_non_integer_confidence_index(index):
    with pytest.raises(InvalidConfidenceIndexError):
        KSTest(confidence_index=index)

def test_bimodal_sample_is_rejected():
    """Two clusters fall outside the band around the normal curve."""
    sample = [0.0] * 10 + [100.0] * 10
    result = KSTest(2).run(Distribution.NORMAL, sample)
    assert result.mark[9] == "+"
    assert result.mark[10] == "-"
    assert not result.fitted

def test_input_not_mutated(annual_maxima):
    original = list(annual_maxima)
    KSTest().run(Distribution.EXTREME_VALUE_I, annual_maxima)
    assert annual_maxima == original

def test_empty_sample():
    with pytest.raises(EmptyInputError):
        KSTest().run(Distribution.NORMAL, [])

def test_to_frame(annual_maxima):
    df = KSTest().run(Distribution.PEARSON_III, annual_maxima).to_frame()
    assert list(df.columns) == [
        "rank", "observed", "estimated", "lower_bound", "upper_bound", "probability", "mark"
    ]
    assert len(df) == len(annual_maxima)
    assert df["rank"].iloc[0] == 1
