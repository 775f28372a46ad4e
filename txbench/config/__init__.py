from txbench.config.base_poly_config import BasePolyConfig
from txbench.config.config import (
    BaseDistributionConfig,
    BaseLoaderConfig,
    BaseSinkConfig,
    BenchmarkConfig,
    FocusedZipfianDistributionConfig,
    InMemorySinkConfig,
    MetricsConfig,
    ScrambledZipfianDistributionConfig,
    SequentialDistributionConfig,
    SqliteSinkConfig,
    UniformDistributionConfig,
    YcsbLoaderConfig,
    ZipfianDistributionConfig,
)

__all__ = [
    "BasePolyConfig",
    "BaseDistributionConfig",
    "BaseLoaderConfig",
    "BaseSinkConfig",
    "BenchmarkConfig",
    "FocusedZipfianDistributionConfig",
    "InMemorySinkConfig",
    "MetricsConfig",
    "ScrambledZipfianDistributionConfig",
    "SequentialDistributionConfig",
    "SqliteSinkConfig",
    "UniformDistributionConfig",
    "YcsbLoaderConfig",
    "ZipfianDistributionConfig",
]
