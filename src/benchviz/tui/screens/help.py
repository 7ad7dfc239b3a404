"""
Help Screen

Lists the key bindings of every benchviz screen.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

KEY_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Global",
        [
            ("q", "Quit application"),
            ("?", "Show this help"),
            ("Esc", "Go back / Close modal"),
        ],
    ),
    (
        "Benchmarks",
        [
            ("j / ↓", "Move down"),
            ("k / ↑", "Move up"),
            ("Enter", "Open the test's charts"),
            ("/", "Focus search input"),
            ("g", "Geometric means of the highlighted directory"),
            ("r", "Reload test_names.json"),
        ],
    ),
    (
        "Charts",
        [
            ("c", "Overlay a comparison test"),
            ("Backspace", "Go back to the list"),
        ],
    ),
]

KEY_COLUMN_WIDTH = 12


def build_help_text(sections: list[tuple[str, list[tuple[str, str]]]] = KEY_SECTIONS) -> str:
    """Render key sections as markup, keys padded to one column."""
    lines = ["[bold]benchviz - Keyboard Shortcuts[/bold]"]
    for title, keys in sections:
        lines.append("")
        lines.append(f"[bold underline]{title}[/bold underline]")
        for key, description in keys:
            lines.append(f"  [cyan]{key}[/]{' ' * max(1, KEY_COLUMN_WIDTH - len(key))}{description}")
    lines.append("")
    lines.append("Panels: ns/op, allocs/op, B/op, MB/s. Missing values leave gaps in a line.")
    lines.append("")
    lines.append("Press [cyan]Esc[/] or [cyan]?[/] to close this help.")
    return "\n".join(lines)


class HelpScreen(ModalScreen[None]):
    """Modal screen displaying help information."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=True),
        Binding("question_mark", "dismiss", "Close", show=False),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > Container {
        width: 72;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }
    """

    def compose(self) -> ComposeResult:
        yield Container(VerticalScroll(Static(build_help_text(), id="help-text")))

    async def action_dismiss(self, result: None = None) -> None:
        self.dismiss(result)
