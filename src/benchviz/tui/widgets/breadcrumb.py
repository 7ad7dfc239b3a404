"""
Breadcrumb Widget

Shows where the current screen sits: Benchmarks > sql > BenchmarkInsert
"""

from __future__ import annotations

from textual.markup import escape
from textual.widgets import Static


class Breadcrumb(Static):
    """One-line trail of the screens above the current one."""

    DEFAULT_CSS = """
    Breadcrumb {
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $surface;
        color: $text-muted;
    }
    """

    def __init__(self, items: list[str], separator: str = " > ") -> None:
        self._items = list(items)
        self._separator = separator
        super().__init__(self.render_items())

    @property
    def trail(self) -> tuple[str, ...]:
        return tuple(self._items)

    def render_items(self) -> str:
        """Markup for the trail: parents dimmed, the current item bold.

        Items are directory and test names read from the data source, so
        they are escaped before being wrapped in markup.
        """
        if not self._items:
            return ""
        *parents, current = (escape(item) for item in self._items)
        return self._separator.join([f"[dim]{item}[/dim]" for item in parents] + [f"[bold]{current}[/bold]"])

    def update_items(self, items: list[str]) -> None:
        self._items = list(items)
        self.update(self.render_items())
