import math
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional, Sequence

import numpy as np
from tqdm import tqdm

from txbench.catalog import Catalog, TableDescriptor
from txbench.config import BaseLoaderConfig
from txbench.exceptions import SinkFailure
from txbench.logger import init_logger
from txbench.metrics.load_stats import LoadStats
from txbench.sink import BaseDataSink
from txbench.utils.random import create_rng
from txbench.utils.text_generator import TextGenerator

logger = init_logger(__name__)


def scaled_record_count(base_record_count: int, scale_factor: float) -> int:
    # round half up
    return int(math.floor(base_record_count * scale_factor + 0.5))


class BaseLoader(ABC):
    """Populates benchmark tables through a data sink in committed batches.

    Every ``commit_batch_size`` rows form one transaction. A sink error rolls
    back the open batch only; batches committed before it stay committed and
    counted, and the error surfaces as ``SinkFailure``.
    """

    def __init__(
        self,
        config: BaseLoaderConfig,
        sink: BaseDataSink,
        catalog: Catalog,
        rng: Optional[np.random.RandomState] = None,
        load_stats: Optional[LoadStats] = None,
    ) -> None:
        self._config = config
        self._sink = sink
        self._catalog = catalog
        self._rng = rng if rng is not None else create_rng()
        self._text_generator = TextGenerator(self._rng)
        self._load_stats = load_stats if load_stats is not None else LoadStats()
        self._table_counts: Dict[str, int] = {}

    @classmethod
    @abstractmethod
    def make_catalog(cls, config: BaseLoaderConfig) -> Catalog:
        pass

    @abstractmethod
    def load(self) -> None:
        pass

    @property
    def scale_factor(self) -> float:
        return self._config.scale_factor

    @property
    def table_counts(self) -> Dict[str, int]:
        return dict(self._table_counts)

    @property
    def load_stats(self) -> LoadStats:
        return self._load_stats

    def get_table_catalog(self, name: str) -> TableDescriptor:
        return self._catalog.get_table(name)

    def _add_table_count(self, table: str, num_rows: int) -> None:
        self._table_counts[table] = self._table_counts.get(table, 0) + num_rows

    def _rollback_quietly(self, table: str) -> None:
        try:
            self._sink.rollback()
        except Exception as e:
            logger.error(f"Rollback failed on table {table}: {e}")

    def _flush_batch(self, table: str, num_rows: int) -> None:
        start_time = time.perf_counter()
        self._sink.submit_batch()
        submitted_at = time.perf_counter()
        self._sink.commit()
        committed_at = time.perf_counter()

        self._add_table_count(table, num_rows)
        self._load_stats.on_batch_committed(
            table, num_rows, submitted_at - start_time, committed_at - submitted_at
        )

    def load_table(
        self,
        table: str,
        rows: Iterable[Sequence[Any]],
        num_rows: Optional[int] = None,
    ) -> int:
        """Insert ``rows`` into ``table`` and return the number committed."""
        batch_size = self._config.commit_batch_size
        rows_before = self._table_counts.get(table, 0)
        batch_index = 0
        batch_rows = 0

        progress = tqdm(
            rows,
            total=num_rows,
            desc=f"Loading {table}",
            disable=not self._config.show_progress,
        )

        try:
            for values in progress:
                try:
                    if batch_rows == 0:
                        self._sink.begin_transaction()
                    self._sink.stage_insert(table, values)
                    batch_rows += 1

                    if batch_rows == batch_size:
                        self._flush_batch(table, batch_rows)
                        batch_rows = 0
                        batch_index += 1
                        logger.debug(
                            f"Records Loaded {self._table_counts[table] - rows_before}"
                            f" / {num_rows}"
                        )
                except Exception as e:
                    self._rollback_quietly(table)
                    raise SinkFailure(
                        table,
                        self._table_counts.get(table, 0) - rows_before,
                        batch_index,
                    ) from e

            if batch_rows > 0:
                try:
                    self._flush_batch(table, batch_rows)
                except Exception as e:
                    self._rollback_quietly(table)
                    raise SinkFailure(
                        table,
                        self._table_counts.get(table, 0) - rows_before,
                        batch_index,
                    ) from e
        except SinkFailure:
            raise
        except BaseException:
            # row generation failed or was interrupted mid-batch
            if batch_rows > 0:
                self._rollback_quietly(table)
            raise
        finally:
            progress.close()

        rows_loaded = self._table_counts.get(table, 0) - rows_before
        logger.debug(f"Records Loaded {rows_loaded} / {num_rows}")
        return rows_loaded

    def unload(self, catalog: Optional[Catalog] = None) -> None:
        """Delete every row of every catalog table, last table first."""
        catalog = catalog if catalog is not None else self._catalog

        for table in reversed(list(catalog)):
            try:
                self._sink.begin_transaction()
                num_deleted = self._sink.delete_all(table.name)
                self._sink.commit()
            except Exception as e:
                self._rollback_quietly(table.name)
                raise SinkFailure(
                    table.name,
                    0,
                    message=f"Failed to delete rows of table {table.name}",
                ) from e

            self._table_counts.pop(table.name, None)
            logger.debug(f"Deleted {num_deleted} rows from {table.name}")
