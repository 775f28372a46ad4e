from typing import Any, Iterator, List, Optional

import numpy as np

from txbench.catalog import Catalog, ColumnDescriptor, TableDescriptor
from txbench.config import YcsbLoaderConfig
from txbench.distributions import BaseIntegerGenerator, create_distribution_generator
from txbench.loader.base_loader import BaseLoader, scaled_record_count
from txbench.logger import init_logger
from txbench.metrics.load_stats import LoadStats
from txbench.sink import BaseDataSink

logger = init_logger(__name__)

YCSB_KEY_COLUMN = "ycsb_key"


class YcsbLoader(BaseLoader):
    """Loads the single YCSB table: an integer key plus ``field_count`` random
    text fields per record."""

    def __init__(
        self,
        config: YcsbLoaderConfig,
        sink: BaseDataSink,
        catalog: Optional[Catalog] = None,
        rng: Optional[np.random.RandomState] = None,
        load_stats: Optional[LoadStats] = None,
    ) -> None:
        if catalog is None:
            catalog = self.make_catalog(config)
        super().__init__(config, sink, catalog, rng, load_stats)

        self._table = self.get_table_catalog(config.table_name)
        self._record_count = scaled_record_count(
            config.base_record_count, config.scale_factor
        )
        # built eagerly so a bad distribution config fails before any write
        self._key_generator = self._make_key_generator()

        logger.debug(f"# of RECORDS: {self._record_count}")

    @classmethod
    def make_catalog(cls, config: YcsbLoaderConfig) -> Catalog:
        columns = [ColumnDescriptor(YCSB_KEY_COLUMN, "INTEGER")] + [
            ColumnDescriptor(name, "TEXT") for name in config.field_names
        ]
        return Catalog([TableDescriptor(config.table_name, tuple(columns))])

    @property
    def record_count(self) -> int:
        return self._record_count

    @property
    def key_generator(self) -> Optional[BaseIntegerGenerator]:
        return self._key_generator

    def _make_key_generator(self) -> Optional[BaseIntegerGenerator]:
        if self._record_count == 0:
            return None
        return create_distribution_generator(
            self._config.key_distribution_config,
            self._rng,
            0,
            self._record_count - 1,
        )

    def _generate_rows(self) -> Iterator[List[Any]]:
        for _ in range(self._record_count):
            row = [self._key_generator.next_value()]
            for _ in range(self._config.field_count):
                row.append(self._text_generator.random_str(self._config.field_length))
            yield row

    def load(self) -> None:
        key_generator = self._key_generator
        if key_generator is not None and key_generator.last_value() is not None:
            # start the key sequence over for a reload
            self._key_generator = self._make_key_generator()

        logger.info(f"Loading {self._record_count} records into {self._table.name}")
        self.load_table(self._table.name, self._generate_rows(), self._record_count)
        logger.debug(f"Finished loading {self._table.name}")
