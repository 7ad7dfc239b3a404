"""
benchviz catalog module

Provides BenchmarkIndex for listing directories and their benchmark tests.
"""

from .benchmark_index import BenchmarkIndex, BenchmarkRef

__all__ = [
    "BenchmarkIndex",
    "BenchmarkRef",
]
