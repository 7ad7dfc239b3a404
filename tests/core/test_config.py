"""Tests for config module."""

from pathlib import Path

import pytest

from benchviz.config import (
    ViewerLimits,
    get_source,
    get_viewer_limits,
    is_dev_mode,
    reset_viewer_limits,
)


class TestGetSource:
    """Tests for get_source function."""

    def test_benchviz_source_takes_priority(self, monkeypatch):
        monkeypatch.setenv("BENCHVIZ_SOURCE", "/custom/bench/data")
        monkeypatch.setenv("XDG_DATA_HOME", "/should/not/be/used")

        assert get_source() == "/custom/bench/data"

    def test_url_is_returned_unchanged(self, monkeypatch):
        monkeypatch.setenv("BENCHVIZ_SOURCE", "https://bench.example.com/data")

        assert get_source() == "https://bench.example.com/data"

    def test_xdg_data_home_used_when_source_not_set(self, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", "/home/user/.local/share")

        assert get_source() == str(Path("/home/user/.local/share/benchviz"))

    def test_fallback_to_home_local_share(self):
        assert get_source() == str(Path.home() / ".local" / "share" / "benchviz")

    def test_path_expansion_with_tilde(self, monkeypatch):
        monkeypatch.setenv("BENCHVIZ_SOURCE", "~/bench")

        assert get_source() == str(Path.home() / "bench")


class TestViewerLimits:
    """Tests for ViewerLimits."""

    def test_defaults(self):
        limits = ViewerLimits.from_env()

        assert limits.fetch_timeout == 30.0
        assert limits.max_chart_points == 500
        assert limits.max_compare_series == 10
        assert limits.pinned_directories == ["sql", "sql/parser"]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BENCHVIZ_FETCH_TIMEOUT", "2.5")
        monkeypatch.setenv("BENCHVIZ_MAX_CHART_POINTS", "100")
        monkeypatch.setenv("BENCHVIZ_MAX_COMPARE_SERIES", "3")
        monkeypatch.setenv("BENCHVIZ_PINNED_DIRECTORIES", " kv , ,storage ")

        limits = ViewerLimits.from_env()

        assert limits.fetch_timeout == 2.5
        assert limits.max_chart_points == 100
        assert limits.max_compare_series == 3
        assert limits.pinned_directories == ["kv", "storage"]

    def test_empty_pinned_directories(self, monkeypatch):
        monkeypatch.setenv("BENCHVIZ_PINNED_DIRECTORIES", "")

        assert ViewerLimits.from_env().pinned_directories == []

    def test_invalid_number_raises(self, monkeypatch):
        monkeypatch.setenv("BENCHVIZ_MAX_CHART_POINTS", "many")

        with pytest.raises(ValueError):
            ViewerLimits.from_env()

    def test_get_viewer_limits_is_cached_until_reset(self, monkeypatch):
        first = get_viewer_limits()
        monkeypatch.setenv("BENCHVIZ_MAX_COMPARE_SERIES", "4")

        assert get_viewer_limits() is first

        reset_viewer_limits()
        assert get_viewer_limits().max_compare_series == 4


class TestDevMode:
    """Tests for is_dev_mode."""

    def test_disabled_by_default(self):
        assert is_dev_mode() is False

    def test_enabled_with_env(self, monkeypatch):
        monkeypatch.setenv("BENCHVIZ_DEV_MODE", "1")
        assert is_dev_mode() is True
