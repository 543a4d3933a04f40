"""
Visualization style configuration.
"""

import matplotlib.pyplot as plt
import seaborn as sns

# Color palette
COLORS = {
    'observed': '#0033FF',    # Blue
    'estimate': '#FF9800',    # Orange
    'lower': '#E6C700',       # Yellow
    'upper': '#F44336',       # Red
    'bar': '#2166AC',         # Blue
    'mean': '#1B9E77',        # Teal
    'trend': '#B2182B',       # Dark red
    'black': '#000000',
    'grid': '#E0E0E0',
}

# One line color per distribution, in Distribution order
DISTRIBUTION_COLORS = ['#1B9E77', '#D95F02', '#7570B3', '#E7298A', '#66A61E']


def set_rainfreq_style(dpi: int = 300):
    """Set the plotting style for RainFreq figures."""
    sns.set_style("ticks")
    sns.set_context("paper", font_scale=1.2)

    plt.rcParams.update({
        'figure.figsize': (6, 4),
        'figure.dpi': 150,
        'savefig.dpi': dpi,
        'font.family': 'sans-serif',
        'font.sans-serif': ['Arial', 'Helvetica', 'DejaVu Sans'],
        'axes.labelsize': 12,
        'axes.titlesize': 14,
        'legend.fontsize': 10,
        'xtick.labelsize': 10,
        'ytick.labelsize': 10,
        'axes.spines.top': False,
        'axes.spines.right': False,
        'axes.grid': True,
        'grid.alpha': 0.3,
        'grid.color': COLORS['grid'],
        'lines.linewidth': 1.5,
    })
