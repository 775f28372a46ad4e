import string

import numpy as np

# printable ASCII, space through tilde
_PRINTABLE_LOW = 32
_PRINTABLE_HIGH = 126

_LETTERS = np.frombuffer(string.ascii_letters.encode("ascii"), dtype=np.uint8)


class TextGenerator:
    """Random column values drawn from the run's shared random source."""

    def __init__(self, rng: np.random.RandomState) -> None:
        self._rng = rng

    def random_str(self, length: int) -> str:
        codes = self._rng.randint(_PRINTABLE_LOW, _PRINTABLE_HIGH + 1, size=length)
        return codes.astype(np.uint8).tobytes().decode("ascii")

    def random_fast_str(self, length: int) -> str:
        """ASCII letters only."""
        indices = self._rng.randint(0, len(_LETTERS), size=length)
        return _LETTERS[indices].tobytes().decode("ascii")

    def random_int(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``."""
        return int(self._rng.randint(low, high + 1, dtype=np.int64))
