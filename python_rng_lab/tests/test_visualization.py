"""Tests for visualization.py: plot generation without errors."""

import os
import tempfile
import pytest

# Force non-interactive backend before importing visualization
import matplotlib
matplotlib.use('Agg')

from enums import DistributionKind
from histogram import build_histogram
from visualization import HistogramPlotter


class TestHistogramPlotter:
    def test_create_plotter(self, sample_histogram):
        plotter = HistogramPlotter(sample_histogram)
        assert plotter.histogram is sample_histogram

    def test_densities(self, sample_histogram):
        plotter = HistogramPlotter(sample_histogram)
        assert plotter.densities() == pytest.approx([0.8, 0.8, 0.8, 1.6])

    def test_plot_uniform(self, sample_histogram):
        plotter = HistogramPlotter(sample_histogram, title="Linear")
        ax = plotter.plot(expected=DistributionKind.UNIFORM)
        assert ax is not None
        assert "Linear" in ax.get_title()
        import matplotlib.pyplot as plt
        plt.close(ax.figure)

    def test_plot_normal_by_value(self):
        hist = build_histogram([-1.0, 0.0, 0.5, 2.0], -3.0, 3.0, 6)
        plotter = HistogramPlotter(hist, title="Polar")
        ax = plotter.plot(expected="normal")
        assert len(ax.lines) == 1
        import matplotlib.pyplot as plt
        plt.close(ax.figure)

    def test_plot_on_existing_axes(self, sample_histogram):
        import matplotlib.pyplot as plt
        fig, ax = plt.subplots()
        returned = HistogramPlotter(sample_histogram).plot(ax=ax)
        assert returned is ax
        assert len(ax.patches) == 4
        plt.close(fig)

    def test_plot_save(self, sample_histogram):
        plotter = HistogramPlotter(sample_histogram)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'plots', 'hist.png')
            ax = plotter.plot(save_path=path)
            assert os.path.exists(path)
            import matplotlib.pyplot as plt
            plt.close(ax.figure)
