from abc import ABC, abstractmethod
from typing import Any, Sequence


class BaseDataSink(ABC):
    """Applies staged row operations to a store under explicit transactions.

    The loader never builds statement text; it only calls the methods below.
    A sink is owned by one thread.
    """

    @abstractmethod
    def begin_transaction(self) -> None:
        pass

    @abstractmethod
    def stage_insert(self, table: str, values: Sequence[Any]) -> None:
        """Buffer one row insert until the next ``submit_batch``."""
        pass

    @abstractmethod
    def submit_batch(self) -> int:
        """Send every staged insert to the store. Returns the row count."""
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard the open transaction, including staged and submitted rows."""
        pass

    @abstractmethod
    def delete_all(self, table: str) -> int:
        """Delete every row of ``table``. Returns the number deleted if known."""
        pass

    @abstractmethod
    def count_rows(self, table: str) -> int:
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
