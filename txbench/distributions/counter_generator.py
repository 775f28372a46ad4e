from typing import Optional

import numpy as np

from txbench.distributions.base_integer_generator import BaseIntegerGenerator


class CounterGenerator(BaseIntegerGenerator):
    """Sequential keys ``start, start + 1, ...``; dense and never repeated."""

    def __init__(self, start: int = 0) -> None:
        self._start = start
        self._next = start

    @classmethod
    def from_config(cls, config, rng: np.random.RandomState, min: int, max: int):
        return cls(min)

    def next_value(self) -> int:
        value = self._next
        self._next += 1
        return value

    def last_value(self) -> Optional[int]:
        if self._next == self._start:
            return None
        return self._next - 1

    def mean(self) -> float:
        # midpoint of the values issued so far
        if self._next == self._start:
            return float(self._start)
        return (self._start + self._next - 1) / 2
