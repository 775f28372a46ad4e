from txbench.sink.base_data_sink import BaseDataSink
from txbench.sink.data_sink_registry import DataSinkRegistry
from txbench.sink.fault_injecting_data_sink import (
    FaultInjectingDataSink,
    InjectedSinkError,
)
from txbench.sink.in_memory_data_sink import InMemoryDataSink
from txbench.sink.sqlite_data_sink import SqliteDataSink

__all__ = [
    "BaseDataSink",
    "DataSinkRegistry",
    "FaultInjectingDataSink",
    "InjectedSinkError",
    "InMemoryDataSink",
    "SqliteDataSink",
]
