"""Process-wide uniform source shared by the normal-distribution generators."""

import time

import numpy as np


class RandomSource:
    """Uniform [0, 1) stream backed by numpy's RandomState.

    Several generators may hold the same instance; they then consume
    interleaved draws from one stream rather than independent streams.
    """

    def __init__(self, seed):
        self.seed = int(seed) % (2**32)
        self._rng = np.random.RandomState(self.seed)

    @classmethod
    def from_wall_clock(cls):
        return cls(int(time.time() * 1000000) % (2**31))

    def uniform(self):
        return float(self._rng.random_sample())

    def uniform_symmetric(self):
        """Uniform draw in [-1, 1)."""
        return 2.0 * self.uniform() - 1.0


_shared = None


def shared_source():
    """Return the lazily created process-wide source."""
    global _shared
    if _shared is None:
        _shared = RandomSource.from_wall_clock()
    return _shared
