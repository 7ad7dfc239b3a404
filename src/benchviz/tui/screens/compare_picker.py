"""
Compare Picker Screen

Modal search list of every directory/test, used to choose a comparison.
"""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from benchviz.catalog import BenchmarkIndex, BenchmarkRef


class ComparePickerScreen(ModalScreen[BenchmarkRef | None]):
    """Modal returning the chosen BenchmarkRef, or None when cancelled."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    DEFAULT_CSS = """
    ComparePickerScreen {
        align: center middle;
    }

    ComparePickerScreen > Container {
        width: 80%;
        height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    ComparePickerScreen OptionList {
        height: 1fr;
    }
    """

    def __init__(self, index: BenchmarkIndex) -> None:
        super().__init__()
        self._index = index
        self._shown: list[BenchmarkRef] = []

    def compose(self) -> ComposeResult:
        """Compose the picker."""
        yield Container(
            Static("Compare with", classes="screen-title"),
            Input(placeholder="Search tests...", id="compare-search"),
            OptionList(id="compare-options"),
        )

    def on_mount(self) -> None:
        self._fill("")
        self.query_one("#compare-search", Input).focus()

    def options(self, text: str) -> list[BenchmarkRef]:
        """Refs matching the search text, the open test included."""
        return self._index.search(text)

    def _fill(self, text: str) -> None:
        option_list = self.query_one("#compare-options", OptionList)
        option_list.clear_options()
        self._shown = self.options(text)
        # Test names may contain slashes, so ids are positions rather than names
        option_list.add_options([Option(ref.name, id=str(position)) for position, ref in enumerate(self._shown)])
        if option_list.option_count:
            option_list.highlighted = 0

    @on(Input.Changed, "#compare-search")
    def on_search_changed(self, event: Input.Changed) -> None:
        self._fill(event.value)

    @on(Input.Submitted, "#compare-search")
    def on_search_submitted(self, event: Input.Submitted) -> None:
        """Choose the highlighted option."""
        option_list = self.query_one("#compare-options", OptionList)
        if option_list.highlighted is None:
            return
        option = option_list.get_option_at_index(option_list.highlighted)
        if option.id is not None:
            self.dismiss(self._shown[int(option.id)])

    @on(OptionList.OptionSelected, "#compare-options")
    def on_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_id is not None:
            self.dismiss(self._shown[int(event.option_id)])

    def action_cancel(self) -> None:
        self.dismiss(None)
