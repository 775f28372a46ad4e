from typing import Optional


class TxBenchError(Exception):
    pass


class ConfigurationError(TxBenchError, ValueError):
    """Invalid generator or loader parameters, raised at construction time."""


class RangeViolationError(TxBenchError, AssertionError):
    """A generated value fell outside its configured key space.

    Generators wrap their results into range, so seeing this is a bug in the
    generator rather than a bad input.
    """

    def __init__(self, value: int, min_value: int, max_value: int) -> None:
        super().__init__(f"Generated value {value} outside [{min_value}, {max_value}]")
        self.value = value
        self.min_value = min_value
        self.max_value = max_value


class SinkFailure(TxBenchError):
    """The data sink rejected a staged insert, a batch submission or a commit.

    Batches committed before the failure stay committed; ``rows_committed``
    tells the caller how far the table got so it can retry the remainder or
    accept a partial population.
    """

    def __init__(
        self,
        table: str,
        rows_committed: int,
        batch_index: Optional[int] = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = (
                f"Sink failure on table {table} at batch {batch_index}"
                f" ({rows_committed} rows committed)"
            )
        super().__init__(message)
        self.table = table
        self.rows_committed = rows_committed
        self.batch_index = batch_index
