from enums import GeneratorType, GENERATOR_NAMES
from generator import Generator


class FibonacciGenerator(Generator):
    """Additive Fibonacci recurrence: x(n) = (x(n-1) + x(n-2)) mod m."""

    name = GENERATOR_NAMES[GeneratorType.FIBONACCI]

    def __init__(self, m, seed=0):
        self.m = m
        self.x1 = 0
        self.x2 = 1
        # A zero seed cannot be told apart from "no seed"
        if seed != 0:
            self.x1 = seed

    def next(self):
        next_value = (self.x1 + self.x2) % self.m

        self.x1 = self.x2
        self.x2 = next_value

        return next_value / self.m

    def __repr__(self):
        return f"FibonacciGenerator(m={self.m}, x1={self.x1}, x2={self.x2})"
