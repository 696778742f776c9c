"""The fixed set of generators built at startup, indexed by menu ordinal."""

import time
from typing import Dict, List, Optional, Tuple

from enums import GeneratorType, DistributionKind
from generator import Generator
from congruential import (
    LinearCongruentialGenerator,
    QuadraticCongruentialGenerator,
    InverseCongruentialGenerator,
)
from fibonacci import FibonacciGenerator
from combine import CombineGenerator
from normal import ThreeSigmaGenerator, PolarGenerator
from random_source import RandomSource

MODULUS = 2147483647

UNIFORM_RANGE = (0.0, 1.0)
NORMAL_RANGE = (-3.0, 3.0)

_DISTRIBUTIONS = {
    GeneratorType.LINEAR: DistributionKind.UNIFORM,
    GeneratorType.QUADRATIC: DistributionKind.UNIFORM,
    GeneratorType.FIBONACCI: DistributionKind.UNIFORM,
    GeneratorType.INVERSE: DistributionKind.UNIFORM,
    GeneratorType.COMBINE: DistributionKind.UNIFORM,
    GeneratorType.THREE_SIGMA: DistributionKind.NORMAL,
    GeneratorType.POLAR: DistributionKind.NORMAL,
}


class GeneratorBank:
    """Owns every generator for the lifetime of the session.

    The combine generator borrows the linear and quadratic instances held
    here, so drawing from it advances those two as well.
    """

    def __init__(self, generators: Dict[GeneratorType, Generator], seed: int,
                 source: RandomSource):
        self._generators = generators
        self.seed = seed
        self.source = source

    @classmethod
    def create_default(cls, seed: Optional[int] = None,
                       source: Optional[RandomSource] = None) -> 'GeneratorBank':
        """Build the seven standard generators in menu order."""
        if seed is None:
            seed = int(time.time())
        if source is None:
            source = RandomSource.from_wall_clock()

        linear = LinearCongruentialGenerator(MODULUS, 16807, 0, seed)
        quadratic = QuadraticCongruentialGenerator(MODULUS, 40014, 0, 53668, seed)

        generators = {
            GeneratorType.LINEAR: linear,
            GeneratorType.QUADRATIC: quadratic,
            GeneratorType.FIBONACCI: FibonacciGenerator(MODULUS, seed),
            # Inverse generator is always seeded with 1
            GeneratorType.INVERSE: InverseCongruentialGenerator(MODULUS, 16805, 10, 1),
            GeneratorType.COMBINE: CombineGenerator(linear, quadratic),
            GeneratorType.THREE_SIGMA: ThreeSigmaGenerator(0.0, 1.0, source),
            GeneratorType.POLAR: PolarGenerator(source),
        }
        return cls(generators, seed, source)

    def __len__(self):
        return len(self._generators)

    def get(self, ordinal) -> Generator:
        return self._generators[self.resolve(ordinal)]

    @staticmethod
    def resolve(ordinal) -> GeneratorType:
        if isinstance(ordinal, GeneratorType):
            return ordinal
        try:
            return GeneratorType(ordinal)
        except ValueError:
            raise KeyError(f"No generator with ordinal {ordinal}") from None

    def menu_entries(self) -> List[Tuple[int, str]]:
        return [(gen_type.value, self._generators[gen_type].name)
                for gen_type in GeneratorType]

    @staticmethod
    def distribution(ordinal) -> DistributionKind:
        return _DISTRIBUTIONS[GeneratorBank.resolve(ordinal)]

    @staticmethod
    def histogram_range(ordinal) -> Tuple[float, float]:
        """Uniform generators are binned over [0, 1], normal ones over [-3, 3]."""
        if GeneratorBank.distribution(ordinal) == DistributionKind.NORMAL:
            return NORMAL_RANGE
        return UNIFORM_RANGE
