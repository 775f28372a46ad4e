from txbench.types.base_int_enum import BaseIntEnum


class DistributionType(BaseIntEnum):
    UNIFORM = 1
    ZIPFIAN = 2
    SCRAMBLED_ZIPFIAN = 3
    FOCUSED_ZIPFIAN = 4
    SEQUENTIAL = 5
