"""Tests for TUI screens."""

from __future__ import annotations

import datetime
import json
from pathlib import Path

import pytest
from textual.widgets import DataTable, Input

from benchviz.catalog import BenchmarkIndex
from benchviz.tui.app import BenchvizTUIApp
from benchviz.tui.screens import BenchmarksScreen, ComparePickerScreen, MeansScreen, PlotScreen
from benchviz.tui.widgets import SeriesChart


def write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload))


@pytest.fixture
def app(bench_dir: Path) -> BenchvizTUIApp:
    """Create app reading the fixture data directory."""
    return BenchvizTUIApp(source=str(bench_dir))


async def settle(app: BenchvizTUIApp, pilot) -> None:
    """Let screens mount and their fetch workers finish."""
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestBenchmarksScreen:
    """Tests for BenchmarksScreen."""

    @pytest.mark.asyncio
    async def test_lists_tests_pinned_directories_first(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            table = app.screen.query_one("#benchmarks-table", DataTable)

            assert table.row_count == 5
            assert table.get_row_at(0) == ["sql", "BenchmarkDelete"]
            assert table.get_row_at(2) == ["sql/parser", "BenchmarkParse"]

    @pytest.mark.asyncio
    async def test_search_filters_rows(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.screen.query_one("#search-input", Input).value = "insert"
            await pilot.pause()

            table = app.screen.query_one("#benchmarks-table", DataTable)
            assert table.row_count == 1
            assert table.get_row_at(0) == ["sql", "BenchmarkInsert"]

    @pytest.mark.asyncio
    async def test_focus_search_with_slash(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("slash")
            await pilot.pause()
            assert app.screen.query_one("#search-input", Input).has_focus

    @pytest.mark.asyncio
    async def test_missing_index_is_reported(self, tmp_path: Path) -> None:
        app = BenchvizTUIApp(source=str(tmp_path))
        async with app.run_test() as pilot:
            await settle(app, pilot)
            screen = app.screen
            assert isinstance(screen, BenchmarksScreen)
            assert screen.index is None
            assert screen.query_one("#benchmarks-table", DataTable).row_count == 0

    @pytest.mark.asyncio
    async def test_enter_opens_sub_benchmark(self, bench_dir: Path) -> None:
        write_json(bench_dir / "test_names.json", {"sql": ["BenchmarkScan/rows=10-8"]})
        write_json(bench_dir / "sql" / "BenchmarkScan" / "rows=10-8.json", {"15-01-2021": {"N": 10.0}})
        app = BenchvizTUIApp(source=str(bench_dir))

        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("enter")
            await settle(app, pilot)

            screen = app.screen
            assert isinstance(screen, PlotScreen)
            assert screen.error_message is None
            assert screen.presenter.primary is not None
            assert screen.presenter.primary.name == "sql/BenchmarkScan/rows=10-8"

    @pytest.mark.asyncio
    async def test_enter_opens_plot_screen(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("enter")
            await settle(app, pilot)

            screen = app.screen
            assert isinstance(screen, PlotScreen)
            assert screen.presenter.primary is not None
            assert screen.presenter.primary.name == "sql/BenchmarkDelete"

    @pytest.mark.asyncio
    async def test_g_opens_means_screen(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press("g")
            await settle(app, pilot)

            screen = app.screen
            assert isinstance(screen, MeansScreen)
            assert screen.error_message is None
            assert screen.tables[0].dates == [datetime.date(2021, 1, 15), datetime.date(2021, 3, 1)]


class TestPlotScreen:
    """Tests for PlotScreen."""

    @pytest.mark.asyncio
    async def test_draws_four_panels_in_date_order(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.push_screen(PlotScreen("sql", "BenchmarkInsert"))
            await settle(app, pilot)

            charts = list(app.screen.query(SeriesChart))
            assert [c.id for c in charts] == ["NPlot", "APlot", "BPlot", "MPlot"]
            ns = app.screen.query_one("#NPlot", SeriesChart).table
            assert ns.dates == [datetime.date(2021, 1, 15), datetime.date(2021, 3, 1)]
            assert ns.series[0].values == [1700.0, 1500.0]

    @pytest.mark.asyncio
    async def test_fetch_failure_shows_error(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.push_screen(PlotScreen("sql", "BenchmarkMissing"))
            await settle(app, pilot)

            screen = app.screen
            assert isinstance(screen, PlotScreen)
            assert screen.error_message is not None
            assert "sql/BenchmarkMissing.json" in screen.error_message
            assert screen.presenter.primary is None

    @pytest.mark.asyncio
    async def test_compare_overlays_chosen_series(self, app: BenchvizTUIApp) -> None:
        index = BenchmarkIndex.from_json({"kv": ["BenchmarkGet", "BenchmarkPut"]})
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.push_screen(PlotScreen("kv", "BenchmarkGet", index=index))
            await settle(app, pilot)

            await pilot.press("c")
            await pilot.pause()
            assert isinstance(app.screen, ComparePickerScreen)

            await pilot.press("p", "u", "t")
            await pilot.press("enter")
            await settle(app, pilot)

            screen = app.screen
            assert isinstance(screen, PlotScreen)
            assert screen.presenter.comparisons == ["BenchmarkPut"]
            ns = screen.query_one("#NPlot", SeriesChart).table
            assert ns.rows() == [
                [datetime.date(2021, 1, 10), 40.0, None],
                [datetime.date(2021, 1, 15), None, 90.0],
                [datetime.date(2021, 1, 20), 42.0, 95.0],
            ]

    @pytest.mark.asyncio
    async def test_compare_with_sub_benchmark(self, app: BenchvizTUIApp, bench_dir: Path) -> None:
        write_json(bench_dir / "kv" / "BenchmarkGet" / "keys=8.json", {"10-01-2021": {"N": 7.0}})
        index = BenchmarkIndex.from_json({"kv": ["BenchmarkGet", "BenchmarkGet/keys=8"]})
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.push_screen(PlotScreen("kv", "BenchmarkGet", index=index))
            await settle(app, pilot)

            await pilot.press("c")
            await pilot.pause()
            await pilot.press("k", "e", "y", "s")
            await pilot.press("enter")
            await settle(app, pilot)

            screen = app.screen
            assert isinstance(screen, PlotScreen)
            assert screen.error_message is None
            assert screen.presenter.comparisons == ["BenchmarkGet/keys=8"]

    @pytest.mark.asyncio
    async def test_compare_picker_cancel(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.push_screen(PlotScreen("kv", "BenchmarkGet"))
            await settle(app, pilot)

            await pilot.press("c")
            await settle(app, pilot)
            assert isinstance(app.screen, ComparePickerScreen)

            await pilot.press("escape")
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, PlotScreen)
            assert screen.presenter.comparisons == []

    def test_compare_picker_offers_the_open_test(self) -> None:
        index = BenchmarkIndex.from_json({"kv": ["BenchmarkGet", "BenchmarkPut"]})
        picker = ComparePickerScreen(index)

        assert [ref.name for ref in picker.options("")] == ["kv/BenchmarkGet", "kv/BenchmarkPut"]


class TestMeansScreen:
    """Tests for MeansScreen."""

    @pytest.mark.asyncio
    async def test_unknown_directory(self, app: BenchvizTUIApp) -> None:
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.push_screen(MeansScreen("storage"))
            await settle(app, pilot)

            screen = app.screen
            assert isinstance(screen, MeansScreen)
            assert screen.error_message == "No geometric means for storage"
            assert screen.tables == []
