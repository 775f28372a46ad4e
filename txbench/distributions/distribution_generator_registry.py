import numpy as np

from txbench.config import BaseDistributionConfig
from txbench.distributions.base_integer_generator import BaseIntegerGenerator
from txbench.distributions.counter_generator import CounterGenerator
from txbench.distributions.focused_zipfian_generator import FocusedZipfianGenerator
from txbench.distributions.scrambled_zipfian_generator import (
    ScrambledZipfianGenerator,
)
from txbench.distributions.uniform_generator import UniformGenerator
from txbench.distributions.zipfian_generator import ZipfianGenerator
from txbench.types import DistributionType
from txbench.utils.base_registry import BaseRegistry


class DistributionGeneratorRegistry(BaseRegistry):
    @classmethod
    def get_key_from_str(cls, key_str: str) -> DistributionType:
        return DistributionType.from_str(key_str)


DistributionGeneratorRegistry.register(DistributionType.UNIFORM, UniformGenerator)
DistributionGeneratorRegistry.register(DistributionType.ZIPFIAN, ZipfianGenerator)
DistributionGeneratorRegistry.register(
    DistributionType.SCRAMBLED_ZIPFIAN, ScrambledZipfianGenerator
)
DistributionGeneratorRegistry.register(
    DistributionType.FOCUSED_ZIPFIAN, FocusedZipfianGenerator
)
DistributionGeneratorRegistry.register(DistributionType.SEQUENTIAL, CounterGenerator)


def create_distribution_generator(
    config: BaseDistributionConfig,
    rng: np.random.RandomState,
    min_value: int,
    max_value: int,
) -> BaseIntegerGenerator:
    generator_class = DistributionGeneratorRegistry.get_class(config.get_type())
    return generator_class.from_config(config, rng, min_value, max_value)
