import pytest

from txbench.catalog import Catalog, ColumnDescriptor, TableDescriptor
from txbench.exceptions import ConfigurationError


def test_catalog_keeps_creation_order():
    catalog = Catalog.from_dict(
        {
            "warehouse": [("w_id", "INTEGER")],
            "district": [("d_id", "INTEGER"), ("d_name", "TEXT")],
        }
    )

    assert catalog.table_names == ["warehouse", "district"]
    assert len(catalog) == 2
    assert [table.name for table in catalog] == ["warehouse", "district"]
    assert catalog.get_table("district").num_columns == 2


def test_catalog_rejects_duplicates_and_unknown_tables():
    catalog = Catalog([TableDescriptor("t", (ColumnDescriptor("a"),))])

    with pytest.raises(ConfigurationError):
        catalog.add_table(TableDescriptor("t"))
    with pytest.raises(ConfigurationError):
        catalog.get_table("missing")
    assert catalog.has_table("t")
    assert not catalog.has_table("missing")


def test_descriptors_are_read_only():
    table = TableDescriptor("t", (ColumnDescriptor("a", "INTEGER"),))

    with pytest.raises(AttributeError):
        table.name = "u"
    assert table.column_names == ["a"]
