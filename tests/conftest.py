"""
Shared pytest fixtures for txbench tests.
"""

import numpy as np
import pytest

from txbench.config import YcsbLoaderConfig
from txbench.sink import InMemoryDataSink


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "sqlite: marks tests that write sqlite files")


@pytest.fixture
def rng():
    return np.random.RandomState(42)


@pytest.fixture
def in_memory_sink():
    return InMemoryDataSink()


@pytest.fixture
def ycsb_config():
    def _make(**kwargs):
        return YcsbLoaderConfig(**kwargs)

    return _make
