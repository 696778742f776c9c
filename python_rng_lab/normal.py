"""Generators targeting a normal distribution.

Both draw their uniforms from a RandomSource. When none is passed they fall
back to the process-wide shared source, so two instances created that way
consume one interleaved stream.
"""

import math
from typing import Optional

from enums import GeneratorType, GENERATOR_NAMES
from generator import Generator
from random_source import RandomSource, shared_source


class ThreeSigmaGenerator(Generator):
    """Irwin-Hall approximation: the sum of 12 uniforms, centred and scaled.

    The output is bounded to mean +/- 6*stddev, so this is only an
    approximation of a Gaussian.
    """

    name = GENERATOR_NAMES[GeneratorType.THREE_SIGMA]
    TERMS = 12

    def __init__(self, mean=0.0, stddev=1.0, source: Optional[RandomSource] = None):
        self.m = mean
        self.s = stddev
        self.source = source if source is not None else shared_source()

    def next(self):
        total = 0.0
        for _ in range(self.TERMS):
            total += self.source.uniform()

        return self.m + (total - 6.0) * self.s

    def __repr__(self):
        return f"ThreeSigmaGenerator(mean={self.m}, stddev={self.s})"


class PolarGenerator(Generator):
    """Marsaglia polar method; standard normal values produced in pairs.

    The second value of each pair is cached and served by the next call.
    With legacy_sentinel=True the cache behaves like a "-1 means empty"
    slot: a spare that is not strictly positive is thrown away and a fresh
    pair is drawn instead, which skews the output towards positive values.
    """

    name = GENERATOR_NAMES[GeneratorType.POLAR]

    def __init__(self, source: Optional[RandomSource] = None, legacy_sentinel=False):
        self.source = source if source is not None else shared_source()
        self.legacy_sentinel = legacy_sentinel
        self._spare: Optional[float] = None

    @property
    def has_spare(self):
        return self._spare is not None

    def next(self):
        if self._spare is not None:
            spare = self._spare
            self._spare = None
            if not self.legacy_sentinel or spare > 0:
                return spare

        while True:
            v1 = self.source.uniform_symmetric()
            v2 = self.source.uniform_symmetric()
            s = v1 * v1 + v2 * v2
            if 0.0 < s < 1.0:
                break

        factor = math.sqrt(-2.0 * math.log(s) / s)
        self._spare = v2 * factor
        return v1 * factor

    def __repr__(self):
        return f"PolarGenerator(legacy_sentinel={self.legacy_sentinel})"
