"""
FastAPI dependency injection for the benchviz API.

This module provides reusable dependencies for:
- SeriesLoader instance management
- Query parameter validation (directory and test names)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, Query

from benchviz.config import get_source
from benchviz.loader import SeriesLoader
from benchviz.utils import validators

# Mutable container for custom source configuration
_custom_source: list[str | None] = [None]


@lru_cache(maxsize=1)
def _get_cached_loader() -> SeriesLoader:
    """Get cached loader instance."""
    source = _custom_source[0] if _custom_source[0] is not None else get_source()
    return SeriesLoader(source)


def get_loader() -> SeriesLoader:
    """Get the SeriesLoader singleton instance."""
    return _get_cached_loader()


def configure_source(source: str | None = None) -> None:
    """Configure the data source and reinitialize the loader.

    Args:
        source: Base URL or directory. If None, uses BENCHVIZ_SOURCE / the default.
    """
    # Clear the cache to force reinitialization
    _get_cached_loader.cache_clear()

    _custom_source[0] = source


def get_validated_directory(directory: Annotated[str, Query(description="Benchmark directory, e.g. sql/parser")]) -> str:
    """Validate the directory query parameter.

    Raises:
        HTTPException: 400 if the directory name is invalid.
    """
    try:
        validators.validate_directory_name(directory)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return directory


def get_validated_test(test: Annotated[str, Query(description="Benchmark test name")]) -> str:
    """Validate the test query parameter.

    Raises:
        HTTPException: 400 if the test name is invalid.
    """
    try:
        validators.validate_test_name(test)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return test


# Type aliases for dependency injection
ValidatedDirectory = Annotated[str, Depends(get_validated_directory)]
ValidatedTest = Annotated[str, Depends(get_validated_test)]
LoaderDep = Annotated[SeriesLoader, Depends(get_loader)]


async def close_loader() -> None:
    """Close the cached loader, if one was created."""
    if _get_cached_loader.cache_info().currsize:
        await _get_cached_loader().aclose()
    _get_cached_loader.cache_clear()
