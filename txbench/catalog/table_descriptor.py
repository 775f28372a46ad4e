from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from txbench.exceptions import ConfigurationError


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    sql_type: str = "TEXT"


@dataclass(frozen=True)
class TableDescriptor:
    """Read-only column metadata of one benchmark table."""

    name: str
    columns: Tuple[ColumnDescriptor, ...] = field(default_factory=tuple)

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    @property
    def num_columns(self) -> int:
        return len(self.columns)


class Catalog:
    """Ordered set of table descriptors, in creation order."""

    def __init__(self, tables: Optional[List[TableDescriptor]] = None) -> None:
        self._tables: Dict[str, TableDescriptor] = {}
        for table in tables or []:
            self.add_table(table)

    @classmethod
    def from_dict(cls, tables: Dict[str, List[Tuple[str, str]]]) -> "Catalog":
        """Build a catalog from ``{table: [(column, sql_type), ...]}``."""
        return cls(
            [
                TableDescriptor(
                    name,
                    tuple(ColumnDescriptor(*column) for column in columns),
                )
                for name, columns in tables.items()
            ]
        )

    def add_table(self, table: TableDescriptor) -> None:
        if table.name in self._tables:
            raise ConfigurationError(f"Table {table.name} is already in the catalog")
        self._tables[table.name] = table

    def get_table(self, name: str) -> TableDescriptor:
        if name not in self._tables:
            raise ConfigurationError(f"Unknown table {name}")
        return self._tables[name]

    def has_table(self, name: str) -> bool:
        return name in self._tables

    @property
    def table_names(self) -> List[str]:
        return list(self._tables)

    def __iter__(self) -> Iterator[TableDescriptor]:
        return iter(self._tables.values())

    def __len__(self) -> int:
        return len(self._tables)
