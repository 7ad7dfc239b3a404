"""
Pytest configuration and shared fixtures.
"""

import json
import logging
from pathlib import Path

import pytest

from benchviz.config import reset_viewer_limits

TEST_NAMES = {
    "kv": ["BenchmarkGet", "BenchmarkPut"],
    "sql/parser": ["BenchmarkParse"],
    "sql": ["BenchmarkInsert", "BenchmarkDelete"],
}

SERIES = {
    "sql/BenchmarkInsert": {
        "01-03-2021": {"N": 1500.0, "A": 12, "B": 512, "M": 0},
        "15-01-2021": {"N": 1700.0, "A": 14, "B": 640, "M": 0},
    },
    "sql/BenchmarkDelete": {
        "15-01-2021": {"N": 900.0, "A": 3, "B": 96, "M": 0},
        "02-03-2021": {"N": 880.0, "A": 3, "B": 96, "M": 0},
    },
    "sql/parser/BenchmarkParse": {
        "10-01-2021": {"N": 210.5, "A": 4, "B": 128, "M": 55.2},
    },
    "kv/BenchmarkGet": {
        "10-01-2021": {"N": 40.0, "A": 0, "B": 0, "M": 0},
        "20-01-2021": {"N": 42.0, "A": 0, "B": 0, "M": 0},
    },
    "kv/BenchmarkPut": {
        "15-01-2021": {"N": 90.0, "A": 1, "B": 32, "M": 0},
        "20-01-2021": {"N": 95.0, "A": 1, "B": 32, "M": 0},
    },
}

GEOMETRIC_MEANS = {
    "sql": [
        {"Date": "01-03-2021", "NMean": 1161.9, "AMean": 6.0, "BMean": 221.7, "MMean": 0},
        {"Date": "15-01-2021", "NMean": 1240.9, "AMean": 6.5, "BMean": 247.9, "MMean": 0},
    ],
    "kv": [
        {"Date": "10-01-2021", "NMean": 40.0, "AMean": 0, "BMean": 0, "MMean": 0},
    ],
}


def write_json(path: Path, payload) -> Path:
    """Write a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload))
    return path


@pytest.fixture(autouse=True)
def clean_env_for_tests(monkeypatch):
    """Clean environment variables for test isolation.

    Clears BENCHVIZ_* variables and XDG_DATA_HOME, and drops the cached
    viewer limits before and after every test.
    """
    for name in (
        "BENCHVIZ_SOURCE",
        "BENCHVIZ_FETCH_TIMEOUT",
        "BENCHVIZ_MAX_CHART_POINTS",
        "BENCHVIZ_MAX_COMPARE_SERIES",
        "BENCHVIZ_PINNED_DIRECTORIES",
        "BENCHVIZ_DEV_MODE",
        "XDG_DATA_HOME",
    ):
        monkeypatch.delenv(name, raising=False)
    # Let caplog see package records even after setup_logger has run
    monkeypatch.setattr(logging.getLogger("benchviz"), "propagate", True)
    reset_viewer_limits()
    yield
    reset_viewer_limits()


@pytest.fixture
def bench_dir(tmp_path: Path) -> Path:
    """A data directory laid out like the published benchmark files."""
    write_json(tmp_path / "test_names.json", TEST_NAMES)
    for name, payload in SERIES.items():
        write_json(tmp_path / f"{name}.json", payload)
    write_json(tmp_path / "geometric_means.json", GEOMETRIC_MEANS)
    return tmp_path
