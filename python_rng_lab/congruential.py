"""Congruential generators: linear, quadratic and inverse recurrences mod m.

All three produce values in [0, 1) by dividing the new state by the modulus.
Parameters are taken as given; no period conditions are checked.
"""

from enums import GeneratorType, GENERATOR_NAMES
from generator import Generator


def mod_inverse(a, m):
    """Modular inverse of a modulo m via the iterative extended Euclid.

    Assumes gcd(a, m) == 1. For a == 0 the loop never runs and 1 is
    returned; for other non-coprime inputs the loop stops once the
    remainder hits zero and the coefficient it returns is meaningless.
    Neither case is reported.
    """
    m0 = m
    x0 = 0
    x1 = 1

    while a > 1 and m != 0:
        q = a // m
        t = m
        m = a % m
        a = t
        t = x0
        x0 = x1 - q * x0
        x1 = t

    # Coefficient may be negative here
    if x1 < 0:
        x1 += m0

    return x1


class LinearCongruentialGenerator(Generator):
    """x = (a*x + c) mod m."""

    name = GENERATOR_NAMES[GeneratorType.LINEAR]

    def __init__(self, m, a, c, seed):
        self.m = m
        self.a = a
        self.c = c
        self.x = seed

    def next(self):
        self.x = (self.a * self.x + self.c) % self.m
        return self.x / self.m

    def __repr__(self):
        return f"LinearCongruentialGenerator(m={self.m}, a={self.a}, c={self.c}, x={self.x})"


class QuadraticCongruentialGenerator(Generator):
    """x = (d*x^2 + a*x + c) mod m."""

    name = GENERATOR_NAMES[GeneratorType.QUADRATIC]

    def __init__(self, m, a, c, d, seed):
        self.m = m
        self.a = a
        self.c = c
        self.d = d
        self.x = seed

    def next(self):
        self.x = (self.d * self.x * self.x + self.a * self.x + self.c) % self.m
        return self.x / self.m

    def __repr__(self):
        return (f"QuadraticCongruentialGenerator(m={self.m}, a={self.a}, c={self.c}, "
                f"d={self.d}, x={self.x})")


class InverseCongruentialGenerator(Generator):
    """x = (a * x^-1 + c) mod p, with p treated as prime."""

    name = GENERATOR_NAMES[GeneratorType.INVERSE]

    def __init__(self, p, a, c, seed):
        self.p = p
        self.a = a
        self.c = c
        self.x = seed

    def next(self):
        inv_x = mod_inverse(self.x, self.p)
        self.x = (self.a * inv_x + self.c) % self.p
        return self.x / self.p

    def __repr__(self):
        return f"InverseCongruentialGenerator(p={self.p}, a={self.a}, c={self.c}, x={self.x})"
