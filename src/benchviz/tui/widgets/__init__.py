"""
benchviz TUI Widgets
"""

from .breadcrumb import Breadcrumb
from .series_chart import SeriesChart, chart_points, format_date

__all__ = ["Breadcrumb", "SeriesChart", "chart_points", "format_date"]
