from typing import Optional

import numpy as np

from txbench.distributions.base_integer_generator import BaseIntegerGenerator
from txbench.exceptions import ConfigurationError


class UniformGenerator(BaseIntegerGenerator):
    """Every key in ``[min, max]`` equally likely."""

    def __init__(self, min: int, max: int, rng: np.random.RandomState) -> None:
        if max < min:
            raise ConfigurationError(f"Uniform key space [{min}, {max}] is empty")

        self._min = min
        self._max = max
        self._rng = rng
        self._last_value: Optional[int] = None

    @classmethod
    def from_config(cls, config, rng: np.random.RandomState, min: int, max: int):
        return cls(min, max, rng)

    def next_value(self) -> int:
        self._last_value = int(
            self._rng.randint(self._min, self._max + 1, dtype=np.int64)
        )
        return self._last_value

    def last_value(self) -> Optional[int]:
        return self._last_value

    def mean(self) -> float:
        return (self._min + self._max) / 2
