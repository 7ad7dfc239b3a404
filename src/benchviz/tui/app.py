"""
benchviz TUI Application

Main application class for the terminal benchmark viewer.
"""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding
from textual.theme import Theme

from benchviz.config import get_source
from benchviz.loader import SeriesLoader

# Line colors of the primary series and its overlaid comparisons, in order
CHART_LINE_COLORS = [
    (66, 133, 244),
    (219, 68, 55),
    (244, 180, 0),
    (15, 157, 88),
    (171, 71, 188),
    (0, 172, 193),
    (255, 112, 67),
    (158, 157, 36),
    (92, 107, 192),
    (240, 98, 146),
    (0, 121, 107),
]

BENCHVIZ_THEME = Theme(
    name="benchviz",
    primary="#3367D6",
    secondary="#5F6368",
    accent="#F4B400",
    foreground="#202124",
    background="#F8F9FA",
    surface="#FFFFFF",
    panel="#E8EAED",
    success="#0F9D58",
    error="#DB4437",
    warning="#F4B400",
)


class BenchvizTUIApp(App[None]):
    """benchviz Terminal UI Application.

    Lists benchmark tests and charts their history, with comparisons.
    """

    TITLE = "benchviz"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=True),
        Binding("question_mark", "help", "Help", show=True),
        Binding("escape", "back", "Back", show=True),
    ]

    def __init__(self, source: str | None = None, loader: SeriesLoader | None = None) -> None:
        """Initialize the TUI application.

        Args:
            source: Base URL or directory. Defaults to BENCHVIZ_SOURCE.
            loader: Ready-made loader (used by tests). Overrides ``source``.
        """
        super().__init__()
        self._source = source if source else get_source()
        self._loader = loader

        self.register_theme(BENCHVIZ_THEME)
        self.theme = "benchviz"

    @property
    def source(self) -> str:
        """Get the data source location."""
        return self._source

    @property
    def loader(self) -> SeriesLoader:
        """Get or create the series loader."""
        if self._loader is None:
            self._loader = SeriesLoader(self._source)
        return self._loader

    def on_mount(self) -> None:
        """Handle mount event - push the initial screen."""
        from benchviz.tui.screens import BenchmarksScreen

        self.push_screen(BenchmarksScreen())

    async def action_quit(self) -> None:
        """Close the loader and quit the application."""
        if self._loader is not None:
            await self._loader.aclose()
        self.exit()

    def action_help(self) -> None:
        """Show help screen."""
        from benchviz.tui.screens import HelpScreen

        self.push_screen(HelpScreen())

    async def action_back(self) -> None:
        """Go back to previous screen."""
        if len(self.screen_stack) > 2:
            self.pop_screen()
