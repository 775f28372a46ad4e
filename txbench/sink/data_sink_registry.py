from txbench.sink.in_memory_data_sink import InMemoryDataSink
from txbench.sink.sqlite_data_sink import SqliteDataSink
from txbench.types import SinkType
from txbench.utils.base_registry import BaseRegistry


class DataSinkRegistry(BaseRegistry):
    @classmethod
    def get_key_from_str(cls, key_str: str) -> SinkType:
        return SinkType.from_str(key_str)


DataSinkRegistry.register(SinkType.IN_MEMORY, InMemoryDataSink)
DataSinkRegistry.register(SinkType.SQLITE, SqliteDataSink)
