from txbench.types.base_int_enum import BaseIntEnum


class SinkType(BaseIntEnum):
    IN_MEMORY = 1
    SQLITE = 2
