import os
import random
from typing import Optional

import numpy as np

MAX_SEED = 2**32 - 1


def set_seeds(seed=42):
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


def create_rng(seed: Optional[int] = None) -> np.random.RandomState:
    """The random source shared by every generator of one benchmark run."""
    return np.random.RandomState(seed)


def spawn_rng(rng: np.random.RandomState) -> np.random.RandomState:
    # derive an independent stream, reproducible from the parent's seed
    return np.random.RandomState(rng.randint(0, MAX_SEED, dtype=np.int64))
