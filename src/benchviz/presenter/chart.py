"""
ChartPresenter - assembles the four metric panels of a benchmark chart.

A chart view shows one panel per MetricField. Each panel owns a SeriesTable
that starts with the primary test's series and gains one column per
overlaid comparison. Panels live in a ChartRegistry that is passed to
whoever needs to mutate them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from benchviz.config import get_viewer_limits
from benchviz.models import BenchmarkSeries, MetricField
from benchviz.presenter.table import ChartTable, build_table, overlay
from benchviz.series import SeriesTable

logger = logging.getLogger(__name__)

__all__ = ["ChartPanel", "ChartPresenter", "ChartRegistry"]


@dataclass
class ChartPanel:
    """One metric panel and the table behind it."""

    metric: MetricField
    table: SeriesTable = field(default_factory=SeriesTable)

    @property
    def panel_id(self) -> str:
        return self.metric.panel_id

    @property
    def title(self) -> str:
        return self.metric.title

    def chart_table(self) -> ChartTable:
        """Drawable table for this panel."""
        return build_table(self.table, title=self.title, panel_id=self.panel_id)


class ChartRegistry:
    """Registry of live chart panels keyed by panel id."""

    def __init__(self) -> None:
        self._panels: dict[str, ChartPanel] = {}

    def register(self, panel: ChartPanel) -> ChartPanel:
        """Add a panel.

        Raises:
            ValueError: If a panel with the same id is already registered.
        """
        if panel.panel_id in self._panels:
            raise ValueError(f"Panel '{panel.panel_id}' is already registered")
        self._panels[panel.panel_id] = panel
        return panel

    def get(self, panel_id: str) -> ChartPanel:
        """Get a panel by id.

        Raises:
            KeyError: If no such panel is registered.
        """
        try:
            return self._panels[panel_id]
        except KeyError:
            raise KeyError(f"Panel '{panel_id}' is not registered") from None

    def for_metric(self, metric: MetricField) -> ChartPanel:
        """Get the panel showing one metric."""
        return self.get(metric.panel_id)

    def panels(self) -> list[ChartPanel]:
        """Registered panels in registration order."""
        return list(self._panels.values())

    def clear(self) -> None:
        """Drop all panels (the view is being torn down)."""
        self._panels.clear()

    def __contains__(self, panel_id: object) -> bool:
        return panel_id in self._panels

    def __iter__(self) -> Iterator[ChartPanel]:
        return iter(self.panels())

    def __len__(self) -> int:
        return len(self._panels)


class ChartPresenter:
    """Builds and extends the four metric panels of one benchmark chart."""

    def __init__(self, registry: ChartRegistry | None = None, max_compare_series: int | None = None) -> None:
        """Initialize the presenter.

        Args:
            registry: Registry to hold the panels. A new one is created if omitted.
            max_compare_series: Overlay limit. Defaults to BENCHVIZ_MAX_COMPARE_SERIES.
        """
        self.registry = registry if registry is not None else ChartRegistry()
        self.max_compare_series = (
            max_compare_series if max_compare_series is not None else get_viewer_limits().max_compare_series
        )
        self.primary: BenchmarkSeries | None = None
        self.comparisons: list[str] = []

    def open(self, series: BenchmarkSeries) -> list[ChartTable]:
        """Create the panels for a primary series.

        Any panels already in the registry are discarded.

        Returns:
            ChartTables in MetricField order.
        """
        self.registry.clear()
        self.comparisons = []
        self.primary = series
        for metric in MetricField:
            panel = self.registry.register(ChartPanel(metric))
            overlay(panel.table, series, metric, series.test)
        logger.debug(f"Opened chart for {series.name} with {len(series)} dates")
        return self.tables()

    def overlay(self, series: BenchmarkSeries, label: str | None = None) -> list[ChartTable]:
        """Overlay a comparison series on every panel.

        Args:
            series: Comparison series.
            label: Column label. Defaults to the test name.

        Returns:
            Updated ChartTables in MetricField order.

        Raises:
            RuntimeError: If no chart has been opened.
            ValueError: If the overlay limit is reached.
        """
        if self.primary is None or not len(self.registry):
            raise RuntimeError("No chart is open; call open() first")
        if len(self.comparisons) >= self.max_compare_series:
            raise ValueError(f"Too many comparison series (max: {self.max_compare_series})")

        name = label or series.test
        for panel in self.registry:
            overlay(panel.table, series, panel.metric, name)
        self.comparisons.append(name)
        logger.debug(f"Overlaid {series.name} on {self.primary.name}")
        return self.tables()

    def table(self, metric: MetricField) -> ChartTable:
        """ChartTable of one metric panel."""
        return self.registry.for_metric(metric).chart_table()

    def tables(self) -> list[ChartTable]:
        """ChartTables of all panels in MetricField order."""
        return [self.registry.for_metric(metric).chart_table() for metric in MetricField if metric.panel_id in self.registry]

    def close(self) -> None:
        """Discard the panels."""
        self.registry.clear()
        self.primary = None
        self.comparisons = []
