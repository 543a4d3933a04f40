"""
Annual rainfall series plotting module.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from typing import Optional
from .style import COLORS
from ..analysis.statistics import linear_trend
from ..io.load_rainfall import MISSING_SENTINEL


def plot_annual_rainfall(
    df: pd.DataFrame,
    duration: int,
    show_trend: bool = True,
    title: Optional[str] = None,
    ylabel: str = "Rainfall (mm)",
    output_path: Optional[str] = None
):
    """
    Plot the annual maximum series of one duration with its mean and trend.
    """
    fig, ax = plt.subplots(figsize=(6, 4))

    years = df['year'].to_numpy(dtype=float)
    rain = df[duration].to_numpy(dtype=float)
    valid = np.isfinite(rain) & (rain >= MISSING_SENTINEL)
    years, rain = years[valid], rain[valid]

    ax.bar(years, rain, color=COLORS['bar'], alpha=0.7, width=0.8,
           label='Annual maximum')

    if len(rain) > 0:
        avg = rain.mean()
        ax.axhline(avg, color=COLORS['mean'], linestyle='-', linewidth=1.5,
                   label=f'Mean = {avg:.1f}')

    # Add trend line
    if show_trend and len(rain) > 1 and np.ptp(years) > 0:
        slope, intercept, cor = linear_trend(years, rain)
        ax.plot(years, intercept + slope * years, color=COLORS['trend'],
                linestyle='--', alpha=0.8,
                label=f'Trend ({slope:+.2f}/yr, r = {cor:.2f})')

    if title is None:
        title = f"Annual Maximum Rainfall ({duration} min)"
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xlabel("Year")
    ax.legend()

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, bbox_inches='tight')
        plt.close()
    else:
        return fig, ax
