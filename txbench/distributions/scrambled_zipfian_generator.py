from typing import Optional

import numpy as np

from txbench.distributions.base_integer_generator import (
    BaseIntegerGenerator,
    check_in_range,
)
from txbench.distributions.zipfian_generator import ZIPFIAN_CONSTANT, ZipfianGenerator

_FNV_OFFSET_BASIS_64 = 0xCBF29CE484222325
_FNV_PRIME_64 = 0x100000001B3
_MASK_64 = (1 << 64) - 1


def fnv1a_64(value: int) -> int:
    """FNV-1a 64-bit hash over the 8 little-endian bytes of ``value``."""
    h = _FNV_OFFSET_BASIS_64
    for _ in range(8):
        h ^= value & 0xFF
        h = (h * _FNV_PRIME_64) & _MASK_64
        value >>= 8
    return h


class ScrambledZipfianGenerator(BaseIntegerGenerator):
    """Zipfian popularity with the hot keys hashed across the key space
    instead of clustered at ``min``."""

    def __init__(
        self,
        min: int,
        max: int,
        rng: np.random.RandomState,
        theta: float = ZIPFIAN_CONSTANT,
    ) -> None:
        self._zipfian = ZipfianGenerator(min, max, rng, theta)
        self._min = min
        self._max = max
        self._item_count = max - min + 1
        self._last_value: Optional[int] = None

    @classmethod
    def from_config(cls, config, rng: np.random.RandomState, min: int, max: int):
        return cls(min, max, rng, theta=config.theta)

    def next_value(self) -> int:
        rank = self._zipfian.next_rank()
        value = self._min + fnv1a_64(rank) % self._item_count
        self._last_value = check_in_range(value, self._min, self._max)
        return value

    def last_value(self) -> Optional[int]:
        return self._last_value

    def mean(self) -> float:
        # hashing spreads the mass evenly in expectation
        return (self._min + self._max) / 2
