from typing import Iterator, Optional

import numpy as np

from txbench.distributions.base_integer_generator import (
    BaseIntegerGenerator,
    check_in_range,
)
from txbench.exceptions import ConfigurationError
from txbench.logger import init_logger

logger = init_logger(__name__)

ZIPFIAN_CONSTANT = 0.99

# up to this many items the cumulative weights are kept and draws are exact
EXACT_ZETA_ITEM_LIMIT = 1024

ZETA_CHUNK_SIZE = 1 << 20


def rank_chunks(start: int, stop: int) -> Iterator[np.ndarray]:
    for chunk_start in range(start, stop, ZETA_CHUNK_SIZE):
        chunk_stop = min(chunk_start + ZETA_CHUNK_SIZE, stop)
        yield np.arange(chunk_start, chunk_stop, dtype=np.float64)


def zeta(start: int, stop: int, theta: float, initial_sum: float = 0.0) -> float:
    """Sum of ``1 / (r + 1) ** theta`` over ranks ``r`` in ``[start, stop)``,
    added to ``initial_sum``."""
    total = initial_sum
    for ranks in rank_chunks(start, stop):
        total += float(np.sum(np.power(ranks + 1.0, -theta)))
    return total


class ZipfianGenerator(BaseIntegerGenerator):
    """Zipfian integers over ``[min, max]``.

    Rank ``r`` (the distance from ``min``) is drawn with probability
    proportional to ``1 / (r + 1) ** theta``, so ``min`` is the hottest key.
    Small key spaces are inverted exactly from the cumulative weights; large
    ones use the approximation from "Quickly Generating Billion-Record
    Synthetic Databases" (Gray et al., SIGMOD 1994), as YCSB does.

    The zeta constant is cached and extended in place when the item count
    grows. Instances are not thread-safe: give each worker its own generator.
    """

    def __init__(
        self,
        min: int,
        max: int,
        rng: np.random.RandomState,
        theta: float = ZIPFIAN_CONSTANT,
    ) -> None:
        if max < min:
            raise ConfigurationError(
                f"Zipfian key space [{min}, {max}] has a non-positive item count"
            )
        if theta < 0:
            raise ConfigurationError(f"Zipfian theta must be >= 0, got {theta}")

        self._min = min
        self._rng = rng
        self._theta = theta
        self._zeta_2 = zeta(0, 2, theta)

        self._item_count = 0
        self._zeta_n = 0.0
        self._cdf: Optional[np.ndarray] = np.empty(0, dtype=np.float64)
        self._eta: Optional[float] = None
        self._alpha: Optional[float] = None
        self._mean: Optional[float] = None
        self._last_value: Optional[int] = None

        self._extend_zeta(max - min + 1)

    @classmethod
    def from_config(cls, config, rng: np.random.RandomState, min: int, max: int):
        return cls(min, max, rng, theta=config.theta)

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._min + self._item_count - 1

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def zeta_n(self) -> float:
        return self._zeta_n

    def _extend_zeta(self, item_count: int) -> None:
        if item_count > EXACT_ZETA_ITEM_LIMIT and self._theta == 1.0:
            # the approximation divides by 1 - theta
            raise ConfigurationError(
                f"Zipfian theta 1 is limited to {EXACT_ZETA_ITEM_LIMIT} items,"
                f" got {item_count}"
            )

        prev_item_count = self._item_count

        if item_count <= EXACT_ZETA_ITEM_LIMIT:
            ranks = np.arange(prev_item_count, item_count, dtype=np.float64)
            weights = np.power(ranks + 1.0, -self._theta)
            self._cdf = np.concatenate([self._cdf, self._zeta_n + np.cumsum(weights)])
            self._zeta_n = float(self._cdf[-1])
        else:
            self._cdf = None
            self._zeta_n = zeta(prev_item_count, item_count, self._theta, self._zeta_n)

        self._item_count = item_count
        self._mean = None

        if self._cdf is None and self._theta > 0:
            self._eta = (1 - np.power(2.0 / item_count, 1 - self._theta)) / (
                1 - self._zeta_2 / self._zeta_n
            )
            self._alpha = 1.0 / (1.0 - self._theta)
        else:
            self._eta = None
            self._alpha = None

    def set_item_count(self, item_count: int) -> None:
        """Resize the key space to ``[min, min + item_count - 1]``.

        Growing only sums the new ranks into the cached zeta. Shrinking has to
        start over and is slow for large key spaces.
        """
        if item_count <= 0:
            raise ConfigurationError(
                f"Zipfian item count must be positive, got {item_count}"
            )
        if item_count == self._item_count:
            return

        if item_count < self._item_count:
            logger.warning(
                f"Recomputing Zipfian distribution, this is slow"
                f" (item_count={item_count}, count_for_zeta={self._item_count})"
            )
            self._item_count = 0
            self._zeta_n = 0.0
            self._cdf = np.empty(0, dtype=np.float64)

        self._extend_zeta(item_count)

    def _approximate_rank(self, u: float) -> int:
        uz = u * self._zeta_n

        if uz < 1.0:
            return 0

        if uz < 1.0 + np.power(0.5, self._theta):
            return 1

        return int(
            self._item_count * np.power(self._eta * u - self._eta + 1, self._alpha)
        )

    def next_rank(self) -> int:
        if self._theta == 0:
            rank = int(self._rng.randint(0, self._item_count, dtype=np.int64))
        elif self._cdf is not None:
            u = self._rng.random_sample()
            rank = int(np.searchsorted(self._cdf, u * self._zeta_n, side="right"))
        else:
            rank = self._approximate_rank(self._rng.random_sample())

        # u close to 1.0 can round up to item_count
        rank = min(rank, self._item_count - 1)

        self._last_value = check_in_range(self._min + rank, self._min, self.max)
        return rank

    def next_value(self) -> int:
        self.next_rank()
        return self._last_value

    def last_rank(self) -> Optional[int]:
        if self._last_value is None:
            return None
        return self._last_value - self._min

    def last_value(self) -> Optional[int]:
        return self._last_value

    def mean(self) -> float:
        """Expected value of the Zipfian law over the current key space."""
        if self._mean is None:
            if self._theta == 0:
                expected_rank = (self._item_count - 1) / 2
            else:
                # sum((r + 1) ** (1 - theta)) - zeta == sum(r / (r + 1) ** theta)
                expected_rank = (
                    zeta(0, self._item_count, self._theta - 1) - self._zeta_n
                ) / self._zeta_n
            self._mean = self._min + expected_rank
        return self._mean
