"""
Means Screen

Shows the four geometric-mean charts of one directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Grid
from textual.markup import escape
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from benchviz.models import MetricField
from benchviz.presenter import ChartTable, build_means_tables
from benchviz.tui.widgets import Breadcrumb, SeriesChart

if TYPE_CHECKING:
    from benchviz.tui.app import BenchvizTUIApp


class MeansScreen(Screen[None]):
    """Screen charting the geometric means of a directory over time."""

    BINDINGS = [
        Binding("backspace", "go_back", "Back", show=False),
    ]

    def __init__(self, directory: str) -> None:
        super().__init__()
        self._directory = directory
        self._error: str | None = None
        self._tables: list[ChartTable] = []

    @property
    def tui_app(self) -> BenchvizTUIApp:
        """Get the typed app instance."""
        from benchviz.tui.app import BenchvizTUIApp

        assert isinstance(self.app, BenchvizTUIApp)
        return self.app

    @property
    def error_message(self) -> str | None:
        """Text of the error line, None when the means loaded."""
        return self._error

    @property
    def tables(self) -> list[ChartTable]:
        return self._tables

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        yield Container(
            Breadcrumb(["Benchmarks", self._directory, "Geometric means"]),
            Static(id="error", classes="error-line"),
            Grid(
                *(SeriesChart(id=metric.panel_id) for metric in MetricField),
                classes="chart-grid",
            ),
            classes="main-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event - fetch geometric_means.json."""
        self.run_worker(self._load_means(), exclusive=True)

    async def _load_means(self) -> None:
        error = self.query_one("#error", Static)
        result = await self.tui_app.loader.fetch_geometric_means()
        if result.error is not None:
            self._error = str(result.error)
            error.update(f"[red]{escape(self._error)}[/red]")
            self.notify(str(result.error), title="Fetch failed", severity="error")
            return

        means = result.unwrap()
        if self._directory not in means:
            self._error = f"No geometric means for {self._directory}"
            error.update(escape(self._error))
            return

        self._tables = build_means_tables(means[self._directory])
        for table in self._tables:
            if table.panel_id is not None:
                self.query_one(f"#{table.panel_id}", SeriesChart).update_table(table)

    def action_go_back(self) -> None:
        """Go back to previous screen."""
        self.app.pop_screen()
