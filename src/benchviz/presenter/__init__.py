"""
benchviz presenter module

Turns SeriesTables into drawable ChartTables and manages the metric panels
of an open chart.
"""

from .chart import ChartPanel, ChartPresenter, ChartRegistry
from .means import build_means_tables
from .table import ChartSeries, ChartTable, build_table, overlay

__all__ = [
    "ChartPanel",
    "ChartPresenter",
    "ChartRegistry",
    "ChartSeries",
    "ChartTable",
    "build_means_tables",
    "build_table",
    "overlay",
]
