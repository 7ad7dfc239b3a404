"""
Response models for the benchviz API.
"""

from pydantic import BaseModel

from benchviz.presenter import ChartTable

__all__ = [
    "ChartsResponse",
    "DirectoryTests",
    "IndexResponse",
    "MeansResponse",
]


class DirectoryTests(BaseModel):
    """A directory and its sorted test names."""

    name: str
    tests: list[str]


class IndexResponse(BaseModel):
    """All directories, pinned directories first."""

    directories: list[DirectoryTests]


class ChartsResponse(BaseModel):
    """The four metric panels of one test, comparisons overlaid."""

    directory: str
    test: str
    comparisons: list[str] = []
    tables: list[ChartTable]


class MeansResponse(BaseModel):
    """The four geometric-mean panels of one directory."""

    directory: str
    tables: list[ChartTable]
