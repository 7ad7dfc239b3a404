"""
Series Chart Widget

Draws one ChartTable (a metric panel) as a multi-line plotext chart.
"""

from __future__ import annotations

import datetime

import numpy as np
from lttb import downsample
from textual.app import ComposeResult
from textual.widget import Widget
from textual_plotext import PlotextPlot

from benchviz.config import get_viewer_limits
from benchviz.presenter import ChartTable
from benchviz.series import DateKey
from benchviz.tui.app import CHART_LINE_COLORS

# lttb keeps the first and last points, so fewer than three is meaningless
MIN_DOWNSAMPLE_POINTS = 3


def chart_points(
    table: ChartTable,
    label: str,
    max_points: int | None = None,
) -> tuple[list[int], list[float]]:
    """X/Y lists for one series of a table.

    X values are day offsets from the table's first date, so every series of
    the table shares the same axis. Empty cells are left out. Series longer
    than ``max_points`` are reduced with LTTB.

    Args:
        table: Table holding the series.
        label: Series label.
        max_points: Downsampling threshold. Defaults to BENCHVIZ_MAX_CHART_POINTS.

    Raises:
        KeyError: If the table has no series with this label.
    """
    if max_points is None:
        max_points = get_viewer_limits().max_chart_points
    points = table.points(label)
    if not points:
        return [], []

    origin = table.dates[0]
    xs = [(date - origin).days for date, _ in points]
    ys = [value for _, value in points]

    threshold = max(max_points, MIN_DOWNSAMPLE_POINTS)
    if len(xs) > threshold:
        data = np.array(list(zip(xs, ys, strict=True)), dtype=float)
        downsampled = downsample(data, threshold)
        xs = [int(d[0]) for d in downsampled]
        ys = [float(d[1]) for d in downsampled]
    return xs, ys


def format_date(date: datetime.date) -> str:
    """Axis label in the source DD-MM-YYYY spelling."""
    return str(DateKey.from_date(date))


class SeriesChart(Widget):
    """A chart panel showing every series of one ChartTable."""

    DEFAULT_CSS = """
    SeriesChart {
        height: 1fr;
        width: 1fr;
        border: solid $panel;
    }
    """

    def __init__(
        self,
        table: ChartTable | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._table = table if table is not None else ChartTable()
        self._plot = PlotextPlot()

    @property
    def table(self) -> ChartTable:
        """Get the table currently drawn."""
        return self._table

    def compose(self) -> ComposeResult:
        """Compose the widget layout."""
        yield self._plot

    def on_mount(self) -> None:
        """Handle mount event - render the chart."""
        self._render_chart()

    def update_table(self, table: ChartTable) -> None:
        """Replace the drawn table and redraw."""
        self._table = table
        if self.is_mounted:
            self._render_chart()

    def _render_chart(self) -> None:
        plt = self._plot.plt
        plt.clear_figure()

        table = self._table
        if table.is_empty:
            plt.title(f"{table.title} (no data)")
            self._plot.refresh()
            return

        plt.title(table.title)
        for i, series in enumerate(table.series):
            xs, ys = chart_points(table, series.label)
            if not xs:
                continue
            plt.plot(xs, ys, color=CHART_LINE_COLORS[i % len(CHART_LINE_COLORS)], label=series.label)

        first, last = table.dates[0], table.dates[-1]
        span = (last - first).days
        if span:
            plt.xticks([0, span], [format_date(first), format_date(last)])
        else:
            plt.xticks([0], [format_date(first)])
        self._plot.refresh()
