"""
Frequency curve plotting module.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from typing import Optional, Sequence
from .style import COLORS, DISTRIBUTION_COLORS
from ..analysis.statistics import plotting_position


def _reduced_variate(T: np.ndarray) -> np.ndarray:
    """Gumbel reduced variate y = -ln(-ln(1 - 1/T))."""
    return -np.log(-np.log(1 - 1 / np.asarray(T, dtype=float)))


def plot_frequency_curves(
    sample: Sequence[float],
    table: pd.DataFrame,
    title: str = "Rainfall Frequency Analysis",
    ylabel: str = "Rainfall (mm)",
    output_path: Optional[str] = None
):
    """
    Plot fitted frequency curves of every distribution with the observations.

    Parameters
    ----------
    sample : array-like
        Annual maximum series
    table : pandas.DataFrame
        Output of :func:`rainfreq.analysis.frequency_table`
        (rows: distributions, columns: return periods)
    """
    fig, ax = plt.subplots(figsize=(6, 4))

    # Observed points at Gringorten plotting positions
    x = np.sort(np.asarray(sample, dtype=float))
    n = len(x)
    exceedance = np.array([plotting_position(n - i, n, 'gringorten') for i in range(n)])
    y_obs = _reduced_variate(1 / exceedance)
    ax.scatter(y_obs, x, color=COLORS['observed'], marker='o', s=25,
               alpha=0.7, zorder=3, label='Observed')

    T_vals = np.asarray(table.columns, dtype=float)
    y_vals = _reduced_variate(T_vals)
    for color, (name, row) in zip(DISTRIBUTION_COLORS, table.iterrows()):
        ax.plot(y_vals, row.values, color=color, label=name)

    # Configure x-axis (Gumbel scale)
    ticks_T = T_vals[T_vals > 1]
    ax.set_xticks(_reduced_variate(ticks_T))
    ax.set_xticklabels([f'{t:g}' for t in ticks_T])

    ax.set_xlabel("Return Period (years)")
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.legend(fontsize=8)
    ax.grid(True, which='both', alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, bbox_inches='tight')
        plt.close()
    else:
        return fig, ax
