"""Visualization modules for RainFreq."""

from .style import set_rainfreq_style, COLORS
from .ks_plot import plot_ks_test, plot_ks_probability
from .frequency_plot import plot_frequency_curves
from .annual_series import plot_annual_rainfall

__all__ = [
    "set_rainfreq_style",
    "COLORS",
    "plot_ks_test",
    "plot_ks_probability",
    "plot_frequency_curves",
    "plot_annual_rainfall",
]
