"""
KS band test plotting module.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import Optional
from .style import COLORS
from ..analysis.ks_test import KSResult


def _masked(values: np.ndarray, floor: float = 0.1) -> np.ndarray:
    """Hide NaN and near-zero values so absent bounds leave gaps."""
    values = np.asarray(values, dtype=float)
    with np.errstate(invalid='ignore'):
        return np.where(np.isfinite(values) & (values > floor), values, np.nan)


def _draw_bands(ax, x: np.ndarray, result: KSResult):
    ax.scatter(x, _masked(result.observed), color=COLORS['observed'],
               s=25, zorder=3, label='Observed')
    ax.plot(x, _masked(result.lower_bound), color=COLORS['lower'], label='Lower bound')
    ax.plot(x, _masked(result.estimated), color=COLORS['estimate'],
            linewidth=2, label='Estimate')
    ax.plot(x, _masked(result.upper_bound), color=COLORS['upper'], label='Upper bound')

    # Highlight observations outside the band
    out = np.array([m != 'G' for m in result.mark])
    if out.any():
        ax.scatter(x[out], result.observed[out], facecolors='none',
                   edgecolors=COLORS['black'], s=80, zorder=4, label='Outside band')


def plot_ks_test(
    result: KSResult,
    title: Optional[str] = None,
    ylabel: str = "Rainfall (mm)",
    output_path: Optional[str] = None
):
    """
    Plot observed values and KS confidence bounds against the estimates.
    """
    fig, ax = plt.subplots(figsize=(6, 4))

    _draw_bands(ax, np.asarray(result.estimated, dtype=float), result)

    if title is None:
        title = f"K-S Test ({result.confidence_level}): {result.distribution.label}"
    verdict = "fitted" if result.fitted else "not fitted"
    ax.set_title(f"{title}\n{verdict}, Ca = {result.ca:.3f}", fontsize=11)
    ax.set_xlabel("Estimated value")
    ax.set_ylabel(ylabel)
    ax.legend(loc='upper left')

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, bbox_inches='tight')
        plt.close()
    else:
        return fig, ax


def plot_ks_probability(
    result: KSResult,
    title: Optional[str] = None,
    ylabel: str = "Rainfall (mm)",
    output_path: Optional[str] = None
):
    """
    Plot observed values and KS bounds against non-exceedance probability.

    The x-axis is 1 - m/(n+1) for rank m.
    """
    fig, ax = plt.subplots(figsize=(6, 4))

    _draw_bands(ax, 1.0 - np.asarray(result.probability, dtype=float), result)

    if title is None:
        title = f"Probability Plot: {result.distribution.label}"
    ax.set_title(title, fontsize=11)
    ax.set_xlabel("Non-exceedance probability 1 - m/(n+1)")
    ax.set_ylabel(ylabel)
    ax.set_xlim(0, 1)
    ax.legend(loc='upper left')

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, bbox_inches='tight')
        plt.close()
    else:
        return fig, ax
