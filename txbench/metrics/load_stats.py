import os
from collections import defaultdict
from typing import Dict

import pandas as pd

from txbench.logger import init_logger
from txbench.metrics.constants import BatchMetrics
from txbench.metrics.data_series import DataSeries

logger = init_logger(__name__)

BATCH_ID_STR = "Batch Id"


def _new_table_series() -> Dict[BatchMetrics, DataSeries]:
    return {metric: DataSeries(BATCH_ID_STR, metric.value) for metric in BatchMetrics}


class LoadStats:
    """Per-batch row counts and submit/commit latencies of one load, per table."""

    def __init__(self) -> None:
        self._series: Dict[str, Dict[BatchMetrics, DataSeries]] = defaultdict(
            _new_table_series
        )
        self._num_batches: Dict[str, int] = defaultdict(int)

    def on_batch_committed(
        self, table: str, num_rows: int, submit_time: float, commit_time: float
    ) -> None:
        batch_id = self._num_batches[table]
        self._num_batches[table] += 1

        series = self._series[table]
        series[BatchMetrics.BATCH_NUM_ROWS].put(batch_id, num_rows)
        series[BatchMetrics.BATCH_SUBMIT_TIME].put(batch_id, submit_time)
        series[BatchMetrics.BATCH_COMMIT_TIME].put(batch_id, commit_time)

    def num_batches(self, table: str) -> int:
        return self._num_batches.get(table, 0)

    def to_df(self, table: str) -> pd.DataFrame:
        series = self._series.get(table) or _new_table_series()
        frames = [
            data_series.to_df().set_index(BATCH_ID_STR)
            for data_series in series.values()
        ]
        return pd.concat(frames, axis=1).reset_index()

    def summary(self, table: str) -> Dict[str, float]:
        df = self.to_df(table)
        num_rows = int(df[BatchMetrics.BATCH_NUM_ROWS.value].sum())
        total_time = float(
            df[BatchMetrics.BATCH_SUBMIT_TIME.value].sum()
            + df[BatchMetrics.BATCH_COMMIT_TIME.value].sum()
        )
        return {
            "num_batches": len(df),
            "num_rows": num_rows,
            "total_time": total_time,
            "rows_per_sec": num_rows / total_time if total_time > 0 else 0.0,
        }

    def log_stats(self) -> None:
        for table, series in self._series.items():
            for data_series in series.values():
                data_series.print_distribution_stats(
                    f"{table}_{data_series.metric_name}"
                )

            summary = self.summary(table)
            logger.info(
                f"Loaded {summary['num_rows']} rows into {table} in"
                f" {summary['num_batches']} batches"
                f" ({summary['rows_per_sec']:.0f} rows/s)"
            )

    def save(self, output_dir: str) -> None:
        os.makedirs(output_dir, exist_ok=True)
        for table in self._series:
            self.to_df(table).to_csv(
                f"{output_dir}/{table}_load_stats.csv", index=False
            )
