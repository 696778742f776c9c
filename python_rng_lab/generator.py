from abc import ABC, abstractmethod
from typing import List


class Generator(ABC):
    """Common contract for every pseudo-random generator in the lab."""

    name = "Generator"

    @abstractmethod
    def next(self) -> float:
        """Advance the internal state and return the next value."""
        ...

    def sample(self, n: int) -> List[float]:
        """Draw n successive values in generation order."""
        if n < 0:
            raise ValueError(f"Sample count must be non-negative, got {n}")
        return [self.next() for _ in range(n)]

    def __repr__(self):
        return f"{type(self).__name__}()"
