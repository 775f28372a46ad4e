from txbench.distributions.base_integer_generator import BaseIntegerGenerator
from txbench.distributions.counter_generator import CounterGenerator
from txbench.distributions.distribution_generator_registry import (
    DistributionGeneratorRegistry,
    create_distribution_generator,
)
from txbench.distributions.focused_zipfian_generator import FocusedZipfianGenerator
from txbench.distributions.scrambled_zipfian_generator import (
    ScrambledZipfianGenerator,
)
from txbench.distributions.uniform_generator import UniformGenerator
from txbench.distributions.zipfian_generator import ZipfianGenerator

__all__ = [
    "BaseIntegerGenerator",
    "CounterGenerator",
    "DistributionGeneratorRegistry",
    "FocusedZipfianGenerator",
    "ScrambledZipfianGenerator",
    "UniformGenerator",
    "ZipfianGenerator",
    "create_distribution_generator",
]
