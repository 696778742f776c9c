"""Equal-width histogram of a sample sequence with normalized frequencies."""

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np


@dataclass
class HistogramBin:
    """One interval [start, end] with its count and frequency."""
    start: float
    end: float
    count: int
    frequency: float


@dataclass
class Histogram:
    """Binned view of a sample sequence over [min_range, max_range]."""
    min_range: float
    max_range: float
    total: int  # number of input samples, including dropped ones
    bins: List[HistogramBin] = field(default_factory=list)

    @property
    def width(self) -> float:
        return (self.max_range - self.min_range) / len(self.bins)

    @property
    def dropped(self) -> int:
        return self.total - sum(b.count for b in self.bins)

    def counts(self) -> List[int]:
        return [b.count for b in self.bins]

    def frequencies(self) -> List[float]:
        return [b.frequency for b in self.bins]

    def format_report(self) -> str:
        lines = ["Interval   Frequency"]
        for b in self.bins:
            lines.append(f"[{b.start:g}; {b.end:g}]    {b.frequency:g}")
        return "\n".join(lines)


def build_histogram(values: Sequence[float], min_range: float, max_range: float,
                    num_intervals: int) -> Histogram:
    """Bin values into num_intervals equal-width intervals over [min_range, max_range].

    Values outside the closed range are dropped silently. Frequencies are
    taken against the full input length, so they sum to less than 1 when
    anything was dropped, and are all 0 for an empty input. A value equal
    to max_range is counted in the last bin.
    """
    if num_intervals < 1:
        raise ValueError(f"Number of intervals must be positive, got {num_intervals}")
    if not max_range > min_range:
        raise ValueError(f"Invalid range: [{min_range}, {max_range}]")

    data = np.asarray(values, dtype=np.float64).ravel()
    total = int(data.size)
    interval_size = (max_range - min_range) / num_intervals

    in_range = data[(data >= min_range) & (data <= max_range)]
    indices = np.floor((in_range - min_range) / interval_size).astype(np.int64)
    # The top edge maps to index num_intervals; fold it into the last bin
    indices = np.clip(indices, 0, num_intervals - 1)
    counts = np.bincount(indices, minlength=num_intervals)

    if total > 0:
        frequencies = counts / total
    else:
        frequencies = np.zeros(num_intervals, dtype=np.float64)

    bins = []
    for i in range(num_intervals):
        bins.append(HistogramBin(
            start=min_range + i * interval_size,
            end=min_range + (i + 1) * interval_size,
            count=int(counts[i]),
            frequency=float(frequencies[i]),
        ))

    return Histogram(min_range=min_range, max_range=max_range, total=total, bins=bins)
