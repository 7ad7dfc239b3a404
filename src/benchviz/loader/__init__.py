"""
benchviz loader module

Provides data sources for the static JSON files and the SeriesLoader that
decodes them into FetchResults.
"""

from .loader import GEOMETRIC_MEANS_PATH, TEST_INDEX_PATH, FetchResult, SeriesLoader, series_path
from .sources import DataSource, DirectoryDataSource, HttpDataSource, open_source

__all__ = [
    "DataSource",
    "DirectoryDataSource",
    "FetchResult",
    "GEOMETRIC_MEANS_PATH",
    "HttpDataSource",
    "SeriesLoader",
    "TEST_INDEX_PATH",
    "open_source",
    "series_path",
]
