"""
benchviz - nightly benchmark history viewer.

Loads the per-test benchmark JSON files published by a nightly run, merges
series by date and charts them in the terminal or serves them over a JSON API.

Examples:
    >>> from benchviz import SeriesTable, DateKey
    >>> table = SeriesTable()
    >>> col = table.add_column("BenchmarkInsert")
    >>> table.upsert_row(DateKey.parse("02-01-2020"), col, 42.0)
    >>> [str(row.date) for row in table.rows()]
    ['02-01-2020']
"""

from benchviz.catalog import BenchmarkIndex, BenchmarkRef
from benchviz.loader import FetchResult, SeriesLoader
from benchviz.models import BenchmarkSeries, MetricField
from benchviz.presenter import ChartPresenter, ChartTable
from benchviz.series import DateKey, SeriesTable

__version__ = "0.1.0"
__all__ = [
    "BenchmarkIndex",
    "BenchmarkRef",
    "BenchmarkSeries",
    "ChartPresenter",
    "ChartTable",
    "DateKey",
    "FetchResult",
    "MetricField",
    "SeriesLoader",
    "SeriesTable",
]
