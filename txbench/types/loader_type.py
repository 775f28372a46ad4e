from txbench.types.base_int_enum import BaseIntEnum


class LoaderType(BaseIntEnum):
    YCSB = 1
