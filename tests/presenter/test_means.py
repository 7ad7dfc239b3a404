"""Tests for geometric-mean tables."""

import datetime
import logging

from benchviz.models import GeometricMeanRecord
from benchviz.presenter import build_means_tables


def make_record(date: str, ns: float) -> GeometricMeanRecord:
    return GeometricMeanRecord.model_validate({"Date": date, "NMean": ns, "AMean": 1.0, "BMean": 2.0})


class TestBuildMeansTables:
    """Tests for build_means_tables."""

    def test_four_tables_sorted_by_date(self):
        tables = build_means_tables([make_record("01-03-2021", 3.0), make_record("15-01-2021", 4.0)])

        assert [t.title for t in tables] == ["ns/op", "allocs/op", "B/op", "MB/s"]
        ns = tables[0]
        assert ns.dates == [datetime.date(2021, 1, 15), datetime.date(2021, 3, 1)]
        assert ns.columns == ["Date", "value"]
        assert ns.series[0].values == [4.0, 3.0]

    def test_missing_mean_is_empty(self):
        tables = build_means_tables([make_record("01-03-2021", 3.0)])

        assert tables[3].series[0].values == [None]

    def test_malformed_date_is_skipped(self, caplog):
        caplog.set_level(logging.WARNING, logger="benchviz")

        tables = build_means_tables([make_record("2021/03/01", 3.0), make_record("15-01-2021", 4.0)])

        assert tables[0].dates == [datetime.date(2021, 1, 15)]
        assert "Skipping geometric mean" in caplog.text

    def test_custom_label(self):
        tables = build_means_tables([make_record("15-01-2021", 4.0)], label="sql")

        assert tables[0].columns == ["Date", "sql"]

    def test_no_records(self):
        assert all(t.is_empty for t in build_means_tables([]))
