"""
Drawable chart tables.

A ChartTable is what a renderer draws: one date axis and one value list per
series, in ascending date order. ``None`` marks a gap in a series.
"""

from __future__ import annotations

import datetime
from typing import Any

import polars as pl
from pydantic import BaseModel, Field

from benchviz.models import BenchmarkSeries, MetricField
from benchviz.series import SeriesTable
from benchviz.series.table import DATE_COLUMN

__all__ = ["ChartSeries", "ChartTable", "build_table", "overlay"]


class ChartSeries(BaseModel):
    """One line of a chart."""

    label: str
    values: list[float | None]


class ChartTable(BaseModel):
    """Row/column table handed to a chart renderer.

    ``values`` of every series line up with ``dates``.
    """

    title: str = ""
    panel_id: str | None = None
    dates: list[datetime.date] = Field(default_factory=list)
    series: list[ChartSeries] = Field(default_factory=list)

    @property
    def columns(self) -> list[str]:
        """Column labels: the date column followed by one per series."""
        return [DATE_COLUMN] + [s.label for s in self.series]

    @property
    def is_empty(self) -> bool:
        return not self.dates

    def rows(self) -> list[list[Any]]:
        """Rows as ``[date, value, value, ...]`` lists."""
        return [[date] + [s.values[i] for s in self.series] for i, date in enumerate(self.dates)]

    def points(self, label: str) -> list[tuple[datetime.date, float]]:
        """Non-empty (date, value) points of one series.

        Raises:
            KeyError: If no series has this label.
        """
        for s in self.series:
            if s.label == label:
                return [(date, value) for date, value in zip(self.dates, s.values, strict=True) if value is not None]
        raise KeyError(label)

    def to_frame(self) -> pl.DataFrame:
        """Export as a wide polars DataFrame (``Date`` plus one Float64 column per series)."""
        data: dict[str, pl.Series] = {DATE_COLUMN: pl.Series(DATE_COLUMN, self.dates, dtype=pl.Date)}
        for s in self.series:
            data[s.label] = pl.Series(s.label, s.values, dtype=pl.Float64)
        return pl.DataFrame(data)


def build_table(series_table: SeriesTable, title: str = "", panel_id: str | None = None) -> ChartTable:
    """Convert a SeriesTable into a ChartTable.

    Pure transform: the SeriesTable is not modified.

    Args:
        series_table: Table to export.
        title: Chart title.
        panel_id: Identifier of the panel the table belongs to.

    Returns:
        ChartTable with rows in ascending date order.
    """
    rows = series_table.rows()
    series = [
        ChartSeries(label=label, values=[row.cells[index] for row in rows])
        for index, label in enumerate(series_table.unique_labels())
    ]
    return ChartTable(
        title=title,
        panel_id=panel_id,
        dates=[row.date.to_date() for row in rows],
        series=series,
    )


def overlay(series_table: SeriesTable, series: BenchmarkSeries, metric: MetricField, name: str) -> SeriesTable:
    """Add one series as a new column of an existing table.

    Rows and columns already in the table keep their values; dates the new
    series adds get empty cells in every other column.

    Args:
        series_table: Table to extend.
        series: Series providing the values.
        metric: Which of the four metrics to take from each record.
        name: Label of the new column.

    Returns:
        The same SeriesTable, mutated.
    """
    column = series_table.add_column(name)
    series_table.merge(column, series.values(metric))
    return series_table
