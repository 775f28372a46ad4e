from typing import Optional

import numpy as np

from txbench.distributions.base_integer_generator import (
    BaseIntegerGenerator,
    check_in_range,
)
from txbench.distributions.zipfian_generator import (
    ZIPFIAN_CONSTANT,
    ZipfianGenerator,
    rank_chunks,
)
from txbench.exceptions import ConfigurationError


class FocusedZipfianGenerator(BaseIntegerGenerator):
    """Zipfian keys whose hotspot sits at a chosen fraction of the key space.

    The key space is split into ``denom`` equal slices and the hotspot is
    placed in the middle of slice ``num``, i.e. at
    ``min + (item_count // (2 * denom)) * (2 * num + 1)``. Raw Zipfian ranks
    are folded around that center (odd ranks above, even ranks below, halved
    so consecutive ranks do not leave holes) and wrapped back into
    ``[min, max]``, so every key stays reachable.
    """

    def __init__(
        self,
        min: int,
        max: int,
        num: int,
        denom: int,
        rng: np.random.RandomState,
        theta: float = ZIPFIAN_CONSTANT,
    ) -> None:
        if max < min:
            raise ConfigurationError(
                f"Focused Zipfian key space [{min}, {max}] has a non-positive"
                " item count"
            )
        if denom < 1 or not 0 <= num < denom:
            raise ConfigurationError(
                f"Focused Zipfian center {num}/{denom} must satisfy 0 <= num < denom"
            )

        self._min = min
        self._max = max
        self._item_count = max - min + 1

        # one slice of a single key is centered at offset 0
        if denom > 1 and self._item_count // (2 * denom) == 0:
            raise ConfigurationError(
                f"Focused Zipfian denominator {denom} is too large for"
                f" {self._item_count} items"
            )

        self._num = num
        self._denom = denom
        self._offset = (self._item_count // (2 * denom)) * (2 * num + 1)
        # one extra raw rank so the folded span is exactly item_count wide
        self._zipfian = ZipfianGenerator(0, self._item_count, rng, theta)
        self._mean: Optional[float] = None
        self._last_value: Optional[int] = None

    @classmethod
    def from_config(cls, config, rng: np.random.RandomState, min: int, max: int):
        return cls(min, max, config.num, config.denom, rng, theta=config.theta)

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def center(self) -> int:
        return self._min + self._offset

    def _fold(self, rank: int) -> int:
        # odd ranks land above the center, even ranks below
        if rank % 2 == 0:
            return -(rank // 2)
        return rank // 2

    def next_value(self) -> int:
        folded = self._fold(self._zipfian.next_rank())
        # floor modulo keeps negative sums inside the key space
        value = self._min + (folded + self._offset) % self._item_count
        self._last_value = check_in_range(value, self._min, self._max)
        return value

    def last_value(self) -> Optional[int]:
        return self._last_value

    def mean(self) -> float:
        """Exact expectation of the folded and wrapped law."""
        if self._mean is None:
            theta = self._zipfian.theta
            weighted_sum = 0.0
            for ranks in rank_chunks(0, self._zipfian.item_count):
                int_ranks = ranks.astype(np.int64)
                folded = np.where(int_ranks % 2 == 0, -(int_ranks // 2), int_ranks // 2)
                values = self._min + np.mod(folded + self._offset, self._item_count)
                weights = np.power(ranks + 1.0, -theta)
                weighted_sum += float(np.dot(weights, values))
            self._mean = weighted_sum / self._zipfian.zeta_n
        return self._mean
