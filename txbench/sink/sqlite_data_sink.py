import sqlite3
from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

from txbench.catalog import Catalog, TableDescriptor
from txbench.config import SqliteSinkConfig
from txbench.logger import init_logger
from txbench.sink.base_data_sink import BaseDataSink

logger = init_logger(__name__)


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


class SqliteDataSink(BaseDataSink):
    """Writes through a sqlite3 connection.

    The connection runs in autocommit mode so transaction boundaries are
    issued explicitly. Staged rows are grouped per table and sent with one
    ``executemany`` per table on ``submit_batch``.
    """

    def __init__(
        self,
        config: Optional[SqliteSinkConfig] = None,
        catalog: Optional[Catalog] = None,
    ) -> None:
        self._config = config or SqliteSinkConfig()
        self._catalog = catalog
        self._conn = sqlite3.connect(self._config.database_path, isolation_level=None)
        self._staged: Dict[str, List[Tuple[Any, ...]]] = defaultdict(list)

        logger.debug(f"Connected to sqlite database {self._config.database_path}")

        if self._catalog is not None and self._config.create_tables:
            for table in self._catalog:
                self.ensure_table(table)

    @property
    def connection(self) -> sqlite3.Connection:
        return self._conn

    def ensure_table(self, table: TableDescriptor) -> None:
        columns = ", ".join(
            f"{_quote(column.name)} {column.sql_type}" for column in table.columns
        )
        self._conn.execute(
            f"CREATE TABLE IF NOT EXISTS {_quote(table.name)} ({columns})"
        )

    def begin_transaction(self) -> None:
        self._conn.execute("BEGIN")

    def stage_insert(self, table: str, values: Sequence[Any]) -> None:
        self._staged[table].append(tuple(values))

    def submit_batch(self) -> int:
        num_rows = 0
        try:
            for table, rows in self._staged.items():
                placeholders = ", ".join("?" for _ in rows[0])
                self._conn.executemany(
                    f"INSERT INTO {_quote(table)} VALUES ({placeholders})", rows
                )
                num_rows += len(rows)
        finally:
            self._staged = defaultdict(list)
        return num_rows

    def commit(self) -> None:
        self._conn.execute("COMMIT")

    def rollback(self) -> None:
        self._staged = defaultdict(list)
        if self._conn.in_transaction:
            self._conn.execute("ROLLBACK")

    def delete_all(self, table: str) -> int:
        cursor = self._conn.execute(f"DELETE FROM {_quote(table)}")
        return cursor.rowcount

    def count_rows(self, table: str) -> int:
        (count,) = self._conn.execute(
            f"SELECT COUNT(*) FROM {_quote(table)}"
        ).fetchone()
        return count

    def close(self) -> None:
        self._conn.close()
