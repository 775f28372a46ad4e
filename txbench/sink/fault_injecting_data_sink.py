from typing import Any, Optional, Sequence

from txbench.sink.base_data_sink import BaseDataSink


class InjectedSinkError(RuntimeError):
    pass


class FaultInjectingDataSink(BaseDataSink):
    """Wraps another sink and fails the ``fail_on_submit``-th batch submission
    (1-based). Every other call is passed through."""

    def __init__(
        self, sink: BaseDataSink, fail_on_submit: Optional[int] = None
    ) -> None:
        self._sink = sink
        self._fail_on_submit = fail_on_submit
        self.num_submits = 0

    @property
    def wrapped(self) -> BaseDataSink:
        return self._sink

    def begin_transaction(self) -> None:
        self._sink.begin_transaction()

    def stage_insert(self, table: str, values: Sequence[Any]) -> None:
        self._sink.stage_insert(table, values)

    def submit_batch(self) -> int:
        self.num_submits += 1
        if self.num_submits == self._fail_on_submit:
            raise InjectedSinkError(f"Injected failure on submit {self.num_submits}")
        return self._sink.submit_batch()

    def commit(self) -> None:
        self._sink.commit()

    def rollback(self) -> None:
        self._sink.rollback()

    def delete_all(self, table: str) -> int:
        return self._sink.delete_all(table)

    def count_rows(self, table: str) -> int:
        return self._sink.count_rows(table)

    def close(self) -> None:
        self._sink.close()
