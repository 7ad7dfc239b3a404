"""
Benchmarks Screen

Lists every benchmark test grouped by directory, with a search box.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.markup import escape
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Input, Static

from benchviz.catalog import BenchmarkIndex, BenchmarkRef

if TYPE_CHECKING:
    from benchviz.tui.app import BenchvizTUIApp

logger = logging.getLogger(__name__)


class BenchmarksScreen(Screen[None]):
    """Screen listing all directories and their tests."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search", show=True),
        Binding("g", "open_means", "Geomeans", show=True),
        Binding("r", "reload", "Reload", show=True),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("escape", "unfocus_search", "Clear focus", show=False),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._index: BenchmarkIndex | None = None
        self._refs: list[BenchmarkRef] = []

    @property
    def tui_app(self) -> BenchvizTUIApp:
        """Get the typed app instance."""
        from benchviz.tui.app import BenchvizTUIApp

        assert isinstance(self.app, BenchvizTUIApp)
        return self.app

    @property
    def index(self) -> BenchmarkIndex | None:
        """The loaded benchmark index, if any."""
        return self._index

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        yield Container(
            Static("Benchmarks", classes="screen-title"),
            Input(placeholder="Search tests...", id="search-input"),
            Static(id="status", classes="status-line"),
            Vertical(
                DataTable(id="benchmarks-table", cursor_type="row"),
                classes="table-container",
            ),
            classes="main-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event - start loading the index."""
        table = self.query_one("#benchmarks-table", DataTable)
        table.add_column("Directory")
        table.add_column("Test")
        table.focus()
        self.action_reload()

    async def _load_index(self) -> None:
        status = self.query_one("#status", Static)
        status.update(f"Loading {self.tui_app.loader.source.location} ...")

        result = await self.tui_app.loader.fetch_test_index()
        if result.error is not None:
            status.update(f"[red]{escape(str(result.error))}[/red]")
            self.notify(str(result.error), title="Fetch failed", severity="error")
            return

        self._index = result.unwrap()
        logger.debug(f"Loaded index with {len(self._index)} tests")
        status.update(f"{len(self._index)} tests in {len(self._index.directories())} directories")
        self._apply_filter(self.query_one("#search-input", Input).value)

    def _apply_filter(self, text: str) -> None:
        if self._index is None:
            return
        self._refs = self._index.listing(text)
        self._update_table()

    def _update_table(self) -> None:
        table = self.query_one("#benchmarks-table", DataTable)
        table.clear()
        for position, ref in enumerate(self._refs):
            # Keyed by position: a directory and a sub-benchmark name can both contain slashes
            table.add_row(ref.directory, ref.test, key=str(position))

    def _highlighted_ref(self) -> BenchmarkRef | None:
        table = self.query_one("#benchmarks-table", DataTable)
        if not self._refs or table.cursor_row < 0 or table.cursor_row >= len(self._refs):
            return None
        return self._refs[table.cursor_row]

    @on(Input.Changed, "#search-input")
    def on_search_changed(self, event: Input.Changed) -> None:
        """Handle search input change."""
        self._apply_filter(event.value)

    @on(DataTable.RowSelected, "#benchmarks-table")
    def on_benchmark_selected(self, event: DataTable.RowSelected) -> None:
        """Open the chart of the selected test."""
        if event.row_key and event.row_key.value is not None:
            ref = self._refs[int(event.row_key.value)]
            from benchviz.tui.screens import PlotScreen

            self.app.push_screen(PlotScreen(ref.directory, ref.test, index=self._index))

    def action_open_means(self) -> None:
        """Open the geometric means of the highlighted directory."""
        ref = self._highlighted_ref()
        if ref is None:
            self.notify("No directory selected", severity="warning")
            return
        from benchviz.tui.screens import MeansScreen

        self.app.push_screen(MeansScreen(ref.directory))

    def action_reload(self) -> None:
        """Fetch test_names.json again."""
        self.run_worker(self._load_index(), exclusive=True, group="index")

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#search-input", Input).focus()

    def action_cursor_down(self) -> None:
        """Move cursor down in table."""
        self.query_one("#benchmarks-table", DataTable).action_cursor_down()

    def action_cursor_up(self) -> None:
        """Move cursor up in table."""
        self.query_one("#benchmarks-table", DataTable).action_cursor_up()

    def action_unfocus_search(self) -> None:
        """Remove focus from search input (Escape key)."""
        search_input = self.query_one("#search-input", Input)
        if search_input.has_focus:
            self.query_one("#benchmarks-table", DataTable).focus()
