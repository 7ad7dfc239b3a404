"""
SeriesTable - date-indexed table of named numeric columns.

A SeriesTable holds exactly one row per DateKey. Columns are appended when a
comparison series is overlaid; cells nobody wrote hold ``None`` rather than
zero so charts show a gap instead of a false measurement.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import NamedTuple

import polars as pl

from benchviz.exceptions import InvalidDateFormatError, UnknownColumnError
from benchviz.series.datekey import DateKey

logger = logging.getLogger(__name__)

__all__ = ["ColumnHandle", "SeriesRow", "SeriesTable"]

Cell = float | None

DATE_COLUMN = "Date"


class ColumnHandle(NamedTuple):
    """Stable handle for a column returned by SeriesTable.add_column."""

    index: int
    name: str


class SeriesRow(NamedTuple):
    """One table row: the date and one cell per column."""

    date: DateKey
    cells: tuple[Cell, ...]


class SeriesTable:
    """In-memory table mapping a DateKey to a row of numeric cells.

    Rows are kept in a dict keyed by DateKey, so two spellings of the same
    date ("01-01-2020" and "1-1-2020") always land on the same row. Rows are
    sorted when read, so insertion order does not matter.
    """

    def __init__(self) -> None:
        self._columns: list[str] = []
        self._rows: dict[DateKey, list[Cell]] = {}

    @property
    def columns(self) -> list[str]:
        """Column names in insertion order."""
        return list(self._columns)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, date: object) -> bool:
        if isinstance(date, str):
            date = DateKey.parse(date)
        return date in self._rows

    def __iter__(self) -> Iterator[SeriesRow]:
        return iter(self.rows())

    def add_column(self, name: str) -> ColumnHandle:
        """Append a named numeric column.

        Existing rows get an empty cell for the new column.

        Args:
            name: Column label (usually the test name).

        Returns:
            Handle to pass to upsert_row.
        """
        handle = ColumnHandle(index=len(self._columns), name=name)
        self._columns.append(name)
        for cells in self._rows.values():
            cells.append(None)
        return handle

    def _resolve(self, column: ColumnHandle | int) -> int:
        """Map a column handle to its cell index.

        Raises:
            UnknownColumnError: If the handle was not issued by this table.
        """
        if isinstance(column, ColumnHandle):
            index, name = column
            if not 0 <= index < len(self._columns) or self._columns[index] != name:
                raise UnknownColumnError(f"Column {name!r} (index {index}) is not registered in this table")
            return index

        if isinstance(column, bool) or not isinstance(column, int):
            raise UnknownColumnError(f"Column {column!r} is not a column handle")
        if not 0 <= column < len(self._columns):
            raise UnknownColumnError(f"Column index {column} is not registered in this table")
        return column

    def upsert_row(self, date: DateKey | str, column: ColumnHandle | int, value: Cell) -> None:
        """Write one cell, creating the row for ``date`` if needed.

        Args:
            date: DateKey or DD-MM-YYYY string.
            column: Handle returned by add_column.
            value: Cell value, or None for "no value".

        Raises:
            UnknownColumnError: If ``column`` is not registered.
            InvalidDateFormatError: If ``date`` is a malformed string.
        """
        index = self._resolve(column)
        key = date if isinstance(date, DateKey) else DateKey.parse(date)

        cells = self._rows.get(key)
        if cells is None:
            cells = [None] * len(self._columns)
            self._rows[key] = cells
        cells[index] = value

    def merge(self, column: ColumnHandle | int, entries: Iterable[tuple[DateKey | str, Cell]]) -> int:
        """Upsert a sequence of (date, value) pairs into one column.

        An entry whose date string cannot be parsed is skipped with a warning;
        the remaining entries are still written.

        Returns:
            Number of entries written.
        """
        index = self._resolve(column)
        count = 0
        for date, value in entries:
            try:
                key = date if isinstance(date, DateKey) else DateKey.parse(date)
            except InvalidDateFormatError as e:
                logger.warning(f"Skipping entry for column {self._columns[index]!r}: {e}")
                continue
            self.upsert_row(key, index, value)
            count += 1
        return count

    def get(self, date: DateKey | str, column: ColumnHandle | int) -> Cell:
        """Read one cell. Missing rows read as None."""
        index = self._resolve(column)
        key = date if isinstance(date, DateKey) else DateKey.parse(date)
        cells = self._rows.get(key)
        return cells[index] if cells is not None else None

    def dates(self) -> list[DateKey]:
        """Row dates in ascending order."""
        return sorted(self._rows)

    def rows(self) -> list[SeriesRow]:
        """All rows in ascending date order."""
        return [SeriesRow(date, tuple(self._rows[date])) for date in sorted(self._rows)]

    def column_values(self, column: ColumnHandle | int) -> list[Cell]:
        """Cells of one column in ascending date order."""
        index = self._resolve(column)
        return [self._rows[date][index] for date in sorted(self._rows)]

    def unique_labels(self) -> list[str]:
        """Column names with duplicates suffixed so each label is distinct.

        Comparing a test with itself yields two columns with the same name;
        the second becomes ``"name (2)"``.
        """
        labels: list[str] = []
        seen: dict[str, int] = {}
        for name in self._columns:
            count = seen.get(name, 0) + 1
            seen[name] = count
            label = name if count == 1 else f"{name} ({count})"
            while label in labels or label == DATE_COLUMN:
                count += 1
                label = f"{name} ({count})"
            labels.append(label)
        return labels

    def to_frame(self) -> pl.DataFrame:
        """Export as a wide polars DataFrame.

        Returns:
            DataFrame with a ``Date`` column (pl.Date) followed by one Float64
            column per series, rows in ascending date order.
        """
        rows = self.rows()
        data: dict[str, pl.Series] = {
            DATE_COLUMN: pl.Series(DATE_COLUMN, [row.date.to_date() for row in rows], dtype=pl.Date),
        }
        for index, label in enumerate(self.unique_labels()):
            values = [row.cells[index] for row in rows]
            data[label] = pl.Series(label, [float(v) if v is not None else None for v in values], dtype=pl.Float64)
        return pl.DataFrame(data)
