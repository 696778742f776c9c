"""Visualization of sampled histograms using matplotlib."""

import os

try:
    import matplotlib
    if not os.environ.get('MPLBACKEND'):
        matplotlib.use('Agg')  # Non-interactive backend by default
    import matplotlib.pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

import numpy as np
from scipy import stats

from enums import DistributionKind
from histogram import Histogram


class HistogramPlotter:
    """Draws a Histogram as density bars, optionally with the target density."""

    def __init__(self, histogram: Histogram, title: str = "Histogram"):
        if not HAS_MATPLOTLIB:
            raise ImportError(
                "matplotlib is required for visualization. "
                "Install with: pip install matplotlib"
            )
        self.histogram = histogram
        self.title = title

    def densities(self):
        """Frequencies rescaled so the bar areas integrate like a pdf."""
        width = self.histogram.width
        return [f / width for f in self.histogram.frequencies()]

    def plot(self, ax=None, save_path=None, expected=None):
        """Bar chart of bin densities.

        Args:
            ax: existing axes to draw on; a new figure is created if None
            save_path: optional image path, only used for an owned figure
            expected: DistributionKind (or its value) whose density to overlay
        """
        own_fig = ax is None
        if own_fig:
            fig, ax = plt.subplots(figsize=(8, 6))

        starts = [b.start for b in self.histogram.bins]
        ax.bar(starts, self.densities(), width=self.histogram.width, align='edge',
               edgecolor='black', alpha=0.7, label='Sampled')

        if expected is not None:
            kind = DistributionKind(expected)
            xs = np.linspace(self.histogram.min_range, self.histogram.max_range, 200)
            if kind == DistributionKind.NORMAL:
                ax.plot(xs, stats.norm.pdf(xs), 'r-', label='N(0, 1)')
            else:
                ax.plot(xs, stats.uniform.pdf(xs, loc=0.0, scale=1.0), 'r-',
                        label='U(0, 1)')

        ax.set_xlabel('Value')
        ax.set_ylabel('Density')
        ax.set_title(f'{self.title} (n={self.histogram.total})')
        ax.grid(True, alpha=0.3)
        ax.legend()

        if save_path and own_fig:
            directory = os.path.dirname(save_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fig.savefig(save_path, dpi=150, bbox_inches='tight')

        return ax
