from txbench.catalog.table_descriptor import (
    Catalog,
    ColumnDescriptor,
    TableDescriptor,
)

__all__ = ["Catalog", "ColumnDescriptor", "TableDescriptor"]
