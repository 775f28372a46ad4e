from typing import Optional

import numpy as np

from txbench.catalog import Catalog
from txbench.config import BenchmarkConfig
from txbench.loader import BaseLoader, LoaderRegistry
from txbench.logger import init_logger
from txbench.metrics.load_stats import LoadStats
from txbench.sink import BaseDataSink, DataSinkRegistry
from txbench.utils.random import create_rng

logger = init_logger(__name__)


class BenchmarkModule:
    """Wires one benchmark's loader to a sink and a catalog.

    A single random source, seeded from the config, is shared by every
    component built here so a run is reproducible from its seed.
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        sink: Optional[BaseDataSink] = None,
        catalog: Optional[Catalog] = None,
    ) -> None:
        self._config = config
        self._rng = create_rng(config.seed)
        self._load_stats = LoadStats()

        loader_config = config.loader_config
        self._loader_class = LoaderRegistry.get_class(loader_config.get_type())
        if catalog is None:
            catalog = self._loader_class.make_catalog(loader_config)
        self._catalog = catalog
        self._sink = (
            sink
            if sink is not None
            else DataSinkRegistry.get(
                config.sink_config.get_type(), config.sink_config, self._catalog
            )
        )

    def rng(self) -> np.random.RandomState:
        return self._rng

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def sink(self) -> BaseDataSink:
        return self._sink

    @property
    def load_stats(self) -> LoadStats:
        return self._load_stats

    def make_loader(self) -> BaseLoader:
        return self._loader_class(
            self._config.loader_config,
            self._sink,
            self._catalog,
            self._rng,
            self._load_stats,
        )

    def load_database(self) -> BaseLoader:
        loader = self.make_loader()
        loader.load()

        if loader.table_counts:
            counts = "\n".join(
                f"  {table}: {count}" for table, count in loader.table_counts.items()
            )
            logger.info(f"Table Counts:\n{counts}")

        self._load_stats.log_stats()
        if self._config.metrics_config.write_metrics:
            self._load_stats.save(self._config.metrics_config.output_dir)

        return loader

    def clear_database(self) -> None:
        self.make_loader().unload(self._catalog)

    def close(self) -> None:
        self._sink.close()
