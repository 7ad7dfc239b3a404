"""
benchviz data models package.

This package contains the models decoded from the benchmark JSON files.
"""

from benchviz.models.metric import MetricField
from benchviz.models.record import (
    BenchmarkSeries,
    GeometricMeanRecord,
    MetricRecord,
    SeriesEntry,
    decode_geometric_means,
)

__all__ = [
    "BenchmarkSeries",
    "GeometricMeanRecord",
    "MetricField",
    "MetricRecord",
    "SeriesEntry",
    "decode_geometric_means",
]
