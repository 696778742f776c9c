"""Tests for histogram.py: binning, edge clamping, normalization."""

import pytest

from histogram import build_histogram, Histogram, HistogramBin


class TestBuildHistogram:
    def test_edges_and_top_clamp(self, sample_histogram):
        assert sample_histogram.counts() == [1, 1, 1, 2]
        assert sample_histogram.frequencies() == pytest.approx([0.2, 0.2, 0.2, 0.4])
        assert sum(sample_histogram.frequencies()) == pytest.approx(1.0)

    def test_bin_bounds(self, sample_histogram):
        bounds = [(b.start, b.end) for b in sample_histogram.bins]
        assert bounds == pytest.approx([(0.0, 0.25), (0.25, 0.5), (0.5, 0.75), (0.75, 1.0)])
        assert sample_histogram.width == pytest.approx(0.25)

    def test_empty_input(self):
        hist = build_histogram([], 0.0, 1.0, 5)
        assert hist.total == 0
        assert hist.frequencies() == [0.0] * 5
        assert hist.counts() == [0] * 5

    def test_out_of_range_dropped_but_counted_in_total(self):
        hist = build_histogram([-0.5, 0.1, 0.9, 1.5], 0.0, 1.0, 2)
        assert hist.counts() == [1, 1]
        assert hist.total == 4
        assert hist.dropped == 2
        assert hist.frequencies() == pytest.approx([0.25, 0.25])

    def test_symmetric_range(self):
        hist = build_histogram([-3.0, -0.1, 0.0, 2.9, 3.0], -3.0, 3.0, 6)
        assert hist.counts() == [1, 0, 1, 1, 0, 2]

    def test_single_interval(self):
        hist = build_histogram([0.0, 0.3, 1.0], 0.0, 1.0, 1)
        assert hist.counts() == [3]
        assert hist.frequencies() == pytest.approx([1.0])

    def test_top_edge_with_inexact_width(self):
        # 0.1 is not exactly representable; the top edge must not overflow
        hist = build_histogram([1.0, 0.9999999999999999], 0.0, 1.0, 10)
        assert hist.counts()[-1] == 2

    def test_many_intervals(self):
        values = [i / 1000 for i in range(1000)]
        hist = build_histogram(values, 0.0, 1.0, 100)
        assert len(hist.bins) == 100
        assert sum(hist.counts()) == 1000

    @pytest.mark.parametrize("intervals", [0, -3])
    def test_invalid_interval_count(self, intervals):
        with pytest.raises(ValueError):
            build_histogram([0.5], 0.0, 1.0, intervals)

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            build_histogram([0.5], 1.0, 1.0, 4)


class TestHistogramReport:
    def test_format_report(self, sample_histogram):
        lines = sample_histogram.format_report().splitlines()
        assert lines[0] == "Interval   Frequency"
        assert len(lines) == 5
        assert lines[1] == "[0; 0.25]    0.2"
        assert lines[4] == "[0.75; 1]    0.4"

    def test_manual_construction(self):
        hist = Histogram(min_range=0.0, max_range=2.0, total=3, bins=[
            HistogramBin(start=0.0, end=1.0, count=1, frequency=1 / 3),
            HistogramBin(start=1.0, end=2.0, count=1, frequency=1 / 3),
        ])
        assert hist.dropped == 1
        assert hist.width == pytest.approx(1.0)
