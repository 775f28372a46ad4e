from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

from txbench.catalog import Catalog
from txbench.config import InMemorySinkConfig
from txbench.sink.base_data_sink import BaseDataSink


class InMemoryDataSink(BaseDataSink):
    """Keeps committed rows in per-table lists.

    Inserts and deletes of the open transaction are replayed in order on
    ``commit`` and dropped on ``rollback``, so it behaves like a store with
    atomic transactions. ``submitted_batches`` records the size of every
    submitted batch.
    """

    def __init__(
        self,
        config: Optional[InMemorySinkConfig] = None,
        catalog: Optional[Catalog] = None,
    ) -> None:
        self._config = config
        self._catalog = catalog
        self._tables: Dict[str, List[Tuple[Any, ...]]] = defaultdict(list)
        self._staged: List[Tuple[str, Tuple[Any, ...]]] = []
        self._pending_ops: List[Tuple[str, str, List[Tuple[Any, ...]]]] = []
        self._in_transaction = False

        self.submitted_batches: List[int] = []
        self.num_commits = 0
        self.num_rollbacks = 0

    def _check_transaction(self) -> None:
        if not self._in_transaction:
            raise RuntimeError("No open transaction")

    def begin_transaction(self) -> None:
        if self._in_transaction:
            raise RuntimeError("Transaction already open")
        self._in_transaction = True

    def stage_insert(self, table: str, values: Sequence[Any]) -> None:
        self._check_transaction()
        if self._catalog is not None:
            expected = self._catalog.get_table(table).num_columns
            if len(values) != expected:
                raise ValueError(
                    f"Table {table} has {expected} columns, got {len(values)} values"
                )
        self._staged.append((table, tuple(values)))

    def submit_batch(self) -> int:
        self._check_transaction()
        rows_by_table = defaultdict(list)
        for table, values in self._staged:
            rows_by_table[table].append(values)
        for table, rows in rows_by_table.items():
            self._pending_ops.append(("insert", table, rows))

        num_rows = len(self._staged)
        self._staged = []
        self.submitted_batches.append(num_rows)
        return num_rows

    def commit(self) -> None:
        self._check_transaction()
        if self._staged:
            raise RuntimeError("Commit with staged rows that were never submitted")
        for op, table, rows in self._pending_ops:
            if op == "insert":
                self._tables[table].extend(rows)
            else:
                self._tables[table] = []
        self._pending_ops = []
        self._in_transaction = False
        self.num_commits += 1

    def rollback(self) -> None:
        self._staged = []
        self._pending_ops = []
        self._in_transaction = False
        self.num_rollbacks += 1

    def delete_all(self, table: str) -> int:
        self._check_transaction()
        num_rows = self.count_rows(table)
        self._pending_ops.append(("delete", table, []))
        return num_rows

    def count_rows(self, table: str) -> int:
        return len(self._tables.get(table, []))

    def get_rows(self, table: str) -> List[Tuple[Any, ...]]:
        return list(self._tables.get(table, []))
