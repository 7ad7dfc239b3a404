"""
benchviz data models for benchmark records.

This module contains the models decoded from the static JSON files:
per-date metric records, a whole test's series, and per-directory
geometric means.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from benchviz.exceptions import InvalidDateFormatError
from benchviz.models.metric import MetricField
from benchviz.series.datekey import DateKey

logger = logging.getLogger(__name__)


class MetricRecord(BaseModel):
    """One observation of a benchmark on one date.

    Any of the four values may be missing; a missing value means
    "no value", not zero.
    """

    model_config = ConfigDict(populate_by_name=True)

    ns_per_op: float | None = Field(default=None, alias="N", description="Nanoseconds per operation")
    allocs_per_op: float | None = Field(default=None, alias="A", description="Allocations per operation")
    bytes_per_op: float | None = Field(default=None, alias="B", description="Bytes allocated per operation")
    mb_per_s: float | None = Field(default=None, alias="M", description="Throughput in MB/s")

    def value(self, metric: MetricField) -> float | None:
        """Get the value of one metric."""
        return getattr(self, metric.attribute)


class GeometricMeanRecord(BaseModel):
    """Geometric means of all tests in a directory on one date."""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., alias="Date", description="Date in DD-MM-YYYY form")
    ns_per_op: float | None = Field(default=None, alias="NMean")
    allocs_per_op: float | None = Field(default=None, alias="AMean")
    bytes_per_op: float | None = Field(default=None, alias="BMean")
    mb_per_s: float | None = Field(default=None, alias="MMean")

    def value(self, metric: MetricField) -> float | None:
        """Get the mean of one metric."""
        return getattr(self, metric.attribute)


class SeriesEntry(NamedTuple):
    """A dated record inside a BenchmarkSeries."""

    date: DateKey
    record: MetricRecord


@dataclass
class BenchmarkSeries:
    """Full history of one benchmark test, sorted chronologically."""

    directory: str
    test: str
    entries: list[SeriesEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, directory: str, test: str, payload: Any) -> BenchmarkSeries:
        """Decode a per-test JSON object.

        Records whose date cannot be parsed, or whose values are not
        numbers, are skipped with a warning; the rest of the series is kept.

        Args:
            directory: Directory the test belongs to.
            test: Test name.
            payload: Decoded JSON, a mapping of DD-MM-YYYY to metric objects.

        Returns:
            BenchmarkSeries with entries in ascending date order.

        Raises:
            ValueError: If payload is not a JSON object.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Expected a JSON object for {directory}/{test}, got {type(payload).__name__}")

        by_date: dict[DateKey, MetricRecord] = {}
        for date_text, raw in payload.items():
            try:
                date = DateKey.parse(date_text)
                # Charts need a native date, so years outside 1..9999 are dropped here
                date.to_date()
            except InvalidDateFormatError as e:
                logger.warning(f"Skipping record in {directory}/{test}: {e}")
                continue

            try:
                record = MetricRecord.model_validate(raw if raw is not None else {})
            except ValidationError as e:
                logger.warning(f"Skipping record {date_text} in {directory}/{test}: {e.error_count()} invalid value(s)")
                continue

            if date in by_date:
                logger.debug(f"Duplicate date {date} in {directory}/{test}, keeping the later record")
            by_date[date] = record

        entries = [SeriesEntry(date, by_date[date]) for date in sorted(by_date)]
        return cls(directory=directory, test=test, entries=entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SeriesEntry]:
        return iter(self.entries)

    @property
    def name(self) -> str:
        """Qualified name, ``directory/test``."""
        return f"{self.directory}/{self.test}"

    def dates(self) -> list[DateKey]:
        """Dates in ascending order."""
        return [entry.date for entry in self.entries]

    def values(self, metric: MetricField) -> list[tuple[DateKey, float | None]]:
        """(date, value) pairs of one metric in ascending date order."""
        return [(entry.date, entry.record.value(metric)) for entry in self.entries]


def decode_geometric_means(payload: Any) -> dict[str, list[GeometricMeanRecord]]:
    """Decode the geometric-means JSON object.

    Records that fail validation are skipped with a warning. Dates are not
    parsed here; ordering happens when the chart table is built.

    Raises:
        ValueError: If payload is not a mapping of directory to a list.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

    result: dict[str, list[GeometricMeanRecord]] = {}
    for directory, items in payload.items():
        if not isinstance(items, list):
            raise ValueError(f"Expected a list of means for directory {directory!r}")
        records = []
        for item in items:
            try:
                records.append(GeometricMeanRecord.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping geometric mean in {directory}: {e.error_count()} invalid value(s)")
        result[directory] = records
    return result
