from abc import ABC, abstractmethod
from typing import Optional

from txbench.exceptions import RangeViolationError


class BaseIntegerGenerator(ABC):
    """Capability shared by every key distribution.

    Implementations keep their own state; this class only fixes the draw,
    inspect and mean contract.
    """

    @abstractmethod
    def next_value(self) -> int:
        pass

    @abstractmethod
    def last_value(self) -> Optional[int]:
        pass

    @abstractmethod
    def mean(self) -> float:
        pass


def check_in_range(value: int, min_value: int, max_value: int) -> int:
    if value < min_value or value > max_value:
        raise RangeViolationError(value, min_value, max_value)
    return value
