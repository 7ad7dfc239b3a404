"""
Plot Screen

Shows the four metric charts of one test and overlays comparison series.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Grid
from textual.markup import escape
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from benchviz.catalog import BenchmarkIndex, BenchmarkRef
from benchviz.exceptions import FetchError
from benchviz.models import MetricField
from benchviz.presenter import ChartPresenter, ChartTable
from benchviz.tui.widgets import Breadcrumb, SeriesChart

if TYPE_CHECKING:
    from benchviz.tui.app import BenchvizTUIApp

logger = logging.getLogger(__name__)


class PlotScreen(Screen[None]):
    """Screen charting one test, with optional comparison overlays."""

    BINDINGS = [
        Binding("c", "compare", "Compare", show=True),
        Binding("backspace", "go_back", "Back", show=False),
    ]

    def __init__(self, directory: str, test: str, index: BenchmarkIndex | None = None) -> None:
        super().__init__()
        self._directory = directory
        self._test = test
        self._index = index
        self._presenter = ChartPresenter()
        self._error: str | None = None

    @property
    def tui_app(self) -> BenchvizTUIApp:
        """Get the typed app instance."""
        from benchviz.tui.app import BenchvizTUIApp

        assert isinstance(self.app, BenchvizTUIApp)
        return self.app

    @property
    def presenter(self) -> ChartPresenter:
        return self._presenter

    @property
    def error_message(self) -> str | None:
        """Text of the error line, None when no fetch has failed."""
        return self._error

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        yield Container(
            Breadcrumb(["Benchmarks", self._directory, self._test]),
            Static(id="series-info", classes="series-info"),
            Static(id="error", classes="error-line"),
            Grid(
                *(SeriesChart(id=metric.panel_id) for metric in MetricField),
                classes="chart-grid",
            ),
            classes="main-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event - fetch the primary series."""
        self.query_one("#series-info", Static).update(f"Loading {self._directory}/{self._test} ...")
        self.run_worker(self._load_primary(), exclusive=True, group="series")

    async def _load_primary(self) -> None:
        result = await self.tui_app.loader.fetch_series(self._directory, self._test)
        if result.error is not None:
            self._show_error(result.error)
            self.query_one("#series-info", Static).update("")
            return

        series = result.unwrap()
        self._show_tables(self._presenter.open(series))
        if not len(series):
            self.notify(f"{series.name} has no records", severity="warning")

    async def _load_comparison(self, ref: BenchmarkRef) -> None:
        result = await self.tui_app.loader.fetch_series(ref.directory, ref.test)
        if result.error is not None:
            self._show_error(result.error)
            return

        try:
            tables = self._presenter.overlay(result.unwrap())
        except (RuntimeError, ValueError) as e:
            self.notify(str(e), severity="error")
            return
        logger.debug(f"Overlaid {ref.name} on {self._directory}/{self._test}")
        self._clear_error()
        self._show_tables(tables)

    async def _load_index_and_pick(self) -> None:
        result = await self.tui_app.loader.fetch_test_index()
        if result.error is not None:
            self._show_error(result.error)
            return
        self._index = result.unwrap()
        self._open_picker()

    def _show_tables(self, tables: list[ChartTable]) -> None:
        for table in tables:
            if table.panel_id is not None:
                self.query_one(f"#{table.panel_id}", SeriesChart).update_table(table)

        labels = tables[0].columns[1:] if tables else []
        self.query_one("#series-info", Static).update(" | ".join(escape(label) for label in labels))

    def _show_error(self, error: FetchError) -> None:
        self._error = str(error)
        self.query_one("#error", Static).update(f"[red]{escape(str(error))}[/red]")
        self.notify(str(error), title="Fetch failed", severity="error")

    def _clear_error(self) -> None:
        self._error = None
        self.query_one("#error", Static).update("")

    def _open_picker(self) -> None:
        from benchviz.tui.screens import ComparePickerScreen

        assert self._index is not None
        self.app.push_screen(
            ComparePickerScreen(self._index),
            callback=self._on_compare_chosen,
        )

    def _on_compare_chosen(self, ref: BenchmarkRef | None) -> None:
        if ref is None:
            return
        self.run_worker(self._load_comparison(ref), group="compare")

    def action_compare(self) -> None:
        """Pick a series to overlay."""
        if self._presenter.primary is None:
            self.notify("Chart is not loaded yet", severity="warning")
            return
        if len(self._presenter.comparisons) >= self._presenter.max_compare_series:
            self.notify(f"At most {self._presenter.max_compare_series} comparison series", severity="warning")
            return
        if self._index is None:
            self.run_worker(self._load_index_and_pick(), exclusive=True, group="index")
            return
        self._open_picker()

    def action_go_back(self) -> None:
        """Go back to previous screen."""
        self.app.pop_screen()
