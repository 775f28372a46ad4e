from typing import Optional

import pandas as pd

from txbench.logger import init_logger

logger = init_logger(__name__)


class DataSeries:
    def __init__(self, x_name: str, y_name: str) -> None:
        # metrics are a data series of two-dimensional (x, y) datapoints
        self._data_series = []
        self._x_name = x_name
        self._y_name = y_name

    def __len__(self):
        return len(self._data_series)

    @property
    def metric_name(self) -> str:
        return self._y_name

    def put(self, data_x: float, data_y: float) -> None:
        self._data_series.append((data_x, data_y))

    def to_df(self) -> pd.DataFrame:
        return pd.DataFrame(self._data_series, columns=[self._x_name, self._y_name])

    def print_distribution_stats(self, plot_name: Optional[str] = None) -> None:
        if len(self._data_series) == 0:
            return

        df = self.to_df()
        y_name = self._y_name
        logger.debug(
            f"{plot_name or y_name}: {y_name} stats:"
            f" min: {df[y_name].min()},"
            f" max: {df[y_name].max()},"
            f" mean: {df[y_name].mean()},"
            f" median: {df[y_name].median()},"
            f" 95th percentile: {df[y_name].quantile(0.95)},"
            f" 99th percentile: {df[y_name].quantile(0.99)}"
        )
