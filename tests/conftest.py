"""
Shared fixtures for RainFreq tests.
"""
import matplotlib
matplotlib.use("Agg")

import pytest
import numpy as np
import pandas as pd


SAMPLE = [120, 150, 135, 160, 180, 145, 170, 190, 130, 210, 175, 165]


@pytest.fixture
def annual_maxima():
    """Twelve years of annual maximum rainfall."""
    return list(SAMPLE)


@pytest.fixture
def rainfall_df():
    """Annual maxima for two durations in load_rainfall layout."""
    years = np.arange(2000, 2000 + len(SAMPLE))
    df = pd.DataFrame({
        'year': years,
        'staNo': '00H710',
        60: np.array(SAMPLE, dtype=float),
        120: np.array(SAMPLE, dtype=float) * 1.6,
    })
    return df


@pytest.fixture
def rainfall_csv(tmp_path):
    """Rainfall CSV with two durations."""
    lines = ["year,staNo,60,120"]
    for i, v in enumerate(SAMPLE):
        lines.append(f"{2000 + i},00H710,{v:.1f},{v * 1.6:.1f}")
    filepath = tmp_path / "rain.csv"
    filepath.write_text("\n".join(lines) + "\n")
    return str(filepath)
