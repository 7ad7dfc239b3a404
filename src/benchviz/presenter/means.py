"""Geometric-mean charts for a benchmark directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from benchviz.exceptions import InvalidDateFormatError
from benchviz.models import GeometricMeanRecord, MetricField
from benchviz.presenter.table import ChartTable, build_table
from benchviz.series import DateKey, SeriesTable

logger = logging.getLogger(__name__)


def build_means_tables(records: Iterable[GeometricMeanRecord], label: str = "value") -> list[ChartTable]:
    """Build one chronologically sorted ChartTable per metric.

    Records with malformed dates are skipped with a warning.

    Args:
        records: Geometric-mean records of one directory, in any order.
        label: Label of the single series in each table.

    Returns:
        ChartTables in MetricField order.
    """
    tables = {metric: SeriesTable() for metric in MetricField}
    columns = {metric: table.add_column(label) for metric, table in tables.items()}

    for record in records:
        try:
            date = DateKey.parse(record.date)
            date.to_date()
        except InvalidDateFormatError as e:
            logger.warning(f"Skipping geometric mean: {e}")
            continue
        for metric, table in tables.items():
            table.upsert_row(date, columns[metric], record.value(metric))

    return [build_table(tables[metric], title=metric.title, panel_id=metric.panel_id) for metric in MetricField]
