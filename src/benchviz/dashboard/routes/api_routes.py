"""
REST API routes for the benchviz dashboard.

This module handles all REST API endpoints:
- Benchmark index API
- Test chart API (with comparison overlays)
- Geometric means API
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

import msgpack
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from benchviz.catalog import BenchmarkRef
from benchviz.config import get_viewer_limits
from benchviz.exceptions import FetchError
from benchviz.presenter import ChartPresenter, ChartTable, build_means_tables
from benchviz.utils import validators

from ..dependencies import LoaderDep, ValidatedDirectory, ValidatedTest
from ..models import ChartsResponse, DirectoryTests, IndexResponse, MeansResponse

logger = logging.getLogger(__name__)

router = APIRouter()

FORMATS = ("json", "msgpack", "csv")


def _validate_format(format: str) -> None:
    if format not in FORMATS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid format: {format}. Must be one of {', '.join(FORMATS)}",
        )


def _fetch_error_response(error: FetchError) -> HTTPException:
    """Map a FetchError to 404 when the file does not exist, else 502."""
    status_code = 404 if error.status_code == 404 else 502
    return HTTPException(status_code=status_code, detail=str(error))


def _tables_to_csv(tables: list[ChartTable]) -> str:
    """One CSV block per table, each preceded by a ``# title`` line."""
    blocks = []
    for table in tables:
        blocks.append(f"# {table.title}\n{table.to_frame().write_csv()}")
    return "\n".join(blocks)


def _render(payload: BaseModel, tables: list[ChartTable], format: str) -> Response:
    if format == "msgpack":
        # Use single-precision floats to reduce payload size
        packed_data = msgpack.packb(payload.model_dump(mode="json"), use_single_float=True)
        return Response(content=packed_data, media_type="application/x-msgpack")
    if format == "csv":
        return Response(content=_tables_to_csv(tables), media_type="text/csv")
    return JSONResponse(content=payload.model_dump(mode="json"))


@router.get("/api/tests")
async def list_tests(loader: LoaderDep) -> IndexResponse:
    """List all benchmark directories and their tests.

    Returns:
        Directories with pinned ones first, each with sorted test names.

    Raises:
        HTTPException: 502 if test_names.json cannot be fetched or decoded.
    """
    result = await loader.fetch_test_index()
    if result.error is not None:
        raise HTTPException(status_code=502, detail=str(result.error))

    index = result.unwrap()
    return IndexResponse(directories=[DirectoryTests(name=name, tests=index.tests(name)) for name in index.directories()])


@router.get("/api/charts")
async def get_charts(
    directory: ValidatedDirectory,
    test: ValidatedTest,
    loader: LoaderDep,
    compare: Annotated[list[str], Query(description="Comparison series as directory/test")] = [],  # noqa: B006
    format: str = "json",
) -> Response:
    """Get the four metric tables of one test.

    Args:
        directory: Directory of the primary test.
        test: Primary test name.
        compare: Additional series to overlay, each as "directory/test".
        format: Response format - "json" (default), "msgpack" or "csv".

    Returns:
        ChartsResponse in the requested format.

    Raises:
        HTTPException: 400 for invalid names, formats or too many comparisons,
            404 if a series file does not exist, 502 for other fetch failures.
    """
    _validate_format(format)

    try:
        refs = [BenchmarkRef.parse(value) for value in compare]
        for ref in refs:
            validators.validate_directory_name(ref.directory)
            validators.validate_test_name(ref.test)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    limits = get_viewer_limits()
    if len(refs) > limits.max_compare_series:
        raise HTTPException(
            status_code=400,
            detail=f"Too many comparison series ({len(refs)}). Maximum is {limits.max_compare_series}",
        )

    # Fetch primary and comparison series concurrently
    results = await asyncio.gather(
        loader.fetch_series(directory, test),
        *(loader.fetch_series(ref.directory, ref.test) for ref in refs),
    )
    for result in results:
        if result.error is not None:
            raise _fetch_error_response(result.error)

    primary, *comparisons = (result.unwrap() for result in results)
    presenter = ChartPresenter(max_compare_series=limits.max_compare_series)
    tables = presenter.open(primary)
    for series in comparisons:
        tables = presenter.overlay(series)

    payload = ChartsResponse(
        directory=directory,
        test=test,
        comparisons=[ref.name for ref in refs],
        tables=tables,
    )
    return _render(payload, tables, format)


@router.get("/api/means")
async def get_means(directory: ValidatedDirectory, loader: LoaderDep, format: str = "json") -> Response:
    """Get the geometric-mean tables of one directory.

    Args:
        directory: Directory name.
        format: Response format - "json" (default), "msgpack" or "csv".

    Raises:
        HTTPException: 400 for an invalid format, 404 if the directory has no
            geometric means, 502 if geometric_means.json cannot be fetched.
    """
    _validate_format(format)

    result = await loader.fetch_geometric_means()
    if result.error is not None:
        raise HTTPException(status_code=502, detail=str(result.error))

    means = result.unwrap()
    if directory not in means:
        raise HTTPException(status_code=404, detail=f"No geometric means for directory '{directory}'")

    tables = build_means_tables(means[directory])
    payload = MeansResponse(directory=directory, tables=tables)
    return _render(payload, tables, format)
