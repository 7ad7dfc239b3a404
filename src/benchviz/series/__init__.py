"""
benchviz series module

Provides DateKey for ordering DD-MM-YYYY dates and SeriesTable for merging
date-keyed benchmark series into one table.
"""

from .datekey import DateKey, compare, sort_dates
from .table import ColumnHandle, SeriesRow, SeriesTable

__all__ = [
    "ColumnHandle",
    "DateKey",
    "SeriesRow",
    "SeriesTable",
    "compare",
    "sort_dates",
]
