"""Tests for SeriesTable."""

import datetime
import logging

import polars as pl
import pytest

from benchviz.exceptions import UnknownColumnError
from benchviz.series import ColumnHandle, DateKey, SeriesTable


@pytest.fixture
def table():
    return SeriesTable()


class TestUpsertRow:
    """Tests for row creation and cell writes."""

    def test_same_date_different_spellings_share_one_row(self, table):
        """Two writes for one date in two columns yield one row with both values."""
        first = table.add_column("BenchmarkInsert")
        second = table.add_column("BenchmarkDelete")

        table.upsert_row("01-01-2020", first, 1.0)
        table.upsert_row("1-1-2020", second, 2.0)

        assert len(table) == 1
        (row,) = table.rows()
        assert row.date == DateKey(2020, 1, 1)
        assert row.cells == (1.0, 2.0)

    def test_new_row_has_empty_cells_for_other_columns(self, table):
        first = table.add_column("a")
        table.add_column("b")

        table.upsert_row("02-01-2020", first, 5.0)

        assert table.rows()[0].cells == (5.0, None)

    def test_overwrites_existing_cell(self, table):
        col = table.add_column("a")
        table.upsert_row("02-01-2020", col, 5.0)
        table.upsert_row("2-1-2020", col, 6.0)

        assert table.get("02-01-2020", col) == 6.0
        assert len(table) == 1

    def test_zero_is_a_value_not_an_empty_cell(self, table):
        col = table.add_column("a")
        table.upsert_row("02-01-2020", col, 0.0)

        assert table.get("02-01-2020", col) == 0.0

    def test_unknown_column_raises(self, table):
        table.add_column("a")
        with pytest.raises(UnknownColumnError):
            table.upsert_row("02-01-2020", ColumnHandle(index=3, name="ghost"), 1.0)

    def test_handle_from_another_table_raises(self, table):
        table.add_column("a")
        other = SeriesTable().add_column("b")
        with pytest.raises(UnknownColumnError):
            table.upsert_row("02-01-2020", ColumnHandle(index=other.index, name=other.name), 1.0)

    def test_bool_is_not_a_column_index(self, table):
        table.add_column("a")
        with pytest.raises(UnknownColumnError):
            table.upsert_row("02-01-2020", True, 1.0)  # type: ignore[arg-type]

    def test_integer_index_in_range_is_accepted(self, table):
        table.add_column("a")
        table.upsert_row("02-01-2020", 0, 1.0)
        assert table.column_values(0) == [1.0]


class TestAddColumn:
    """Tests for appending columns to a populated table."""

    def test_existing_cells_unchanged_and_new_column_empty(self, table):
        first = table.add_column("a")
        table.upsert_row("10-01-2021", first, 1.0)
        table.upsert_row("20-01-2021", first, 2.0)

        second = table.add_column("b")

        assert table.column_values(first) == [1.0, 2.0]
        assert table.column_values(second) == [None, None]
        assert table.columns == ["a", "b"]

    def test_handles_are_positional(self, table):
        assert table.add_column("a") == ColumnHandle(0, "a")
        assert table.add_column("b") == ColumnHandle(1, "b")


class TestReading:
    """Tests for ordering and export."""

    def test_rows_sorted_regardless_of_insertion_order(self, table):
        col = table.add_column("a")
        for text in ["10-1-2020", "9-1-2020", "1-12-2019"]:
            table.upsert_row(text, col, 1.0)

        assert [str(d) for d in table.dates()] == ["01-12-2019", "09-01-2020", "10-01-2020"]
        assert [row.date for row in table] == table.dates()

    def test_missing_row_reads_as_none(self, table):
        col = table.add_column("a")
        assert table.get("01-01-2020", col) is None

    def test_contains_accepts_strings(self, table):
        col = table.add_column("a")
        table.upsert_row("01-01-2020", col, 1.0)
        assert "1-1-2020" in table
        assert DateKey(2020, 1, 2) not in table

    def test_merge_returns_count(self, table):
        col = table.add_column("a")
        written = table.merge(col, [("01-01-2020", 1.0), (DateKey(2020, 1, 2), None)])
        assert written == 2
        assert len(table) == 2

    def test_merge_skips_malformed_dates_and_continues(self, table, caplog):
        caplog.set_level(logging.WARNING, logger="benchviz")
        col = table.add_column("a")

        written = table.merge(col, [("01-01-2020", 1.0), ("bogus", 2.0), ("03-01-2020", 3.0)])

        assert written == 2
        assert [(str(row.date), row.cells) for row in table.rows()] == [
            ("01-01-2020", (1.0,)),
            ("03-01-2020", (3.0,)),
        ]
        assert "bogus" in caplog.text

    def test_unique_labels_suffix_duplicates(self, table):
        table.add_column("BenchmarkGet")
        table.add_column("BenchmarkGet")
        table.add_column("Date")

        assert table.unique_labels() == ["BenchmarkGet", "BenchmarkGet (2)", "Date (2)"]

    def test_to_frame(self, table):
        a = table.add_column("a")
        b = table.add_column("b")
        table.upsert_row("20-01-2021", a, 2.0)
        table.upsert_row("10-01-2021", a, 1.0)
        table.upsert_row("20-01-2021", b, 3.0)

        df = table.to_frame()

        assert df.columns == ["Date", "a", "b"]
        assert df.schema["Date"] == pl.Date
        assert df["Date"].to_list() == [datetime.date(2021, 1, 10), datetime.date(2021, 1, 20)]
        assert df["b"].to_list() == [None, 3.0]
