from txbench.types.base_int_enum import BaseIntEnum
from txbench.types.distribution_type import DistributionType
from txbench.types.loader_type import LoaderType
from txbench.types.sink_type import SinkType

__all__ = [
    "BaseIntEnum",
    "DistributionType",
    "LoaderType",
    "SinkType",
]
