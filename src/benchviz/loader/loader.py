"""
SeriesLoader - fetches and decodes the benchmark JSON files.

Every fetch completes exactly once with a FetchResult that carries either
the decoded value or the FetchError explaining why there is none. Nothing
is retried and nothing is cached.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from benchviz.catalog import BenchmarkIndex
from benchviz.exceptions import FetchError
from benchviz.loader.sources import DataSource, open_source
from benchviz.models import BenchmarkSeries, GeometricMeanRecord, decode_geometric_means
from benchviz.utils.validators import validate_directory_name, validate_test_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

TEST_INDEX_PATH = "test_names.json"
GEOMETRIC_MEANS_PATH = "geometric_means.json"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a single fetch: a value or an error, never both."""

    value: T | None = None
    error: FetchError | None = None

    @classmethod
    def success(cls, value: T) -> FetchResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> FetchResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True if the fetch produced a value."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the fetch error.

        Raises:
            FetchError: If the fetch failed.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def series_path(directory: str, test: str) -> str:
    """Relative path of a test's series file."""
    return f"{directory}/{test}.json"


class SeriesLoader:
    """Loads the test index, test series and geometric means from a DataSource."""

    def __init__(self, source: DataSource | str) -> None:
        """Initialize the loader.

        Args:
            source: DataSource, or a URL / directory to open one for.
        """
        self.source = open_source(source) if isinstance(source, str) else source

    async def __aenter__(self) -> SeriesLoader:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying source."""
        await self.source.aclose()

    async def _fetch_json(self, path: str) -> Any:
        """Read and decode one JSON file.

        Raises:
            FetchError: If reading or decoding fails.
        """
        content = await self.source.read(path)
        try:
            return json.loads(content)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FetchError(path, f"invalid JSON: {e}") from e

    async def fetch_test_index(self) -> FetchResult[BenchmarkIndex]:
        """Fetch test_names.json.

        Returns:
            FetchResult with the BenchmarkIndex or the error.
        """
        try:
            payload = await self._fetch_json(TEST_INDEX_PATH)
            index = BenchmarkIndex.from_json(payload)
        except FetchError as e:
            logger.warning(str(e))
            return FetchResult.failure(e)
        except ValueError as e:
            logger.warning(f"Invalid {TEST_INDEX_PATH}: {e}")
            return FetchResult.failure(FetchError(TEST_INDEX_PATH, f"invalid content: {e}"))
        return FetchResult.success(index)

    async def fetch_series(self, directory: str, test: str) -> FetchResult[BenchmarkSeries]:
        """Fetch the full history of one test.

        Args:
            directory: Directory name (e.g., "sql/parser").
            test: Test name.

        Returns:
            FetchResult with the BenchmarkSeries or the error.
        """
        path = series_path(directory, test)
        try:
            validate_directory_name(directory)
            validate_test_name(test)
        except ValueError as e:
            return FetchResult.failure(FetchError(path, str(e)))

        try:
            payload = await self._fetch_json(path)
            series = BenchmarkSeries.from_json(directory, test, payload)
        except FetchError as e:
            logger.warning(str(e))
            return FetchResult.failure(e)
        except ValueError as e:
            logger.warning(f"Invalid {path}: {e}")
            return FetchResult.failure(FetchError(path, f"invalid content: {e}"))

        logger.debug(f"Loaded {len(series)} records for {series.name}")
        return FetchResult.success(series)

    async def fetch_geometric_means(self) -> FetchResult[dict[str, list[GeometricMeanRecord]]]:
        """Fetch geometric_means.json.

        Returns:
            FetchResult with directory name to mean records, or the error.
        """
        try:
            payload = await self._fetch_json(GEOMETRIC_MEANS_PATH)
            means = decode_geometric_means(payload)
        except FetchError as e:
            logger.warning(str(e))
            return FetchResult.failure(e)
        except ValueError as e:
            logger.warning(f"Invalid {GEOMETRIC_MEANS_PATH}: {e}")
            return FetchResult.failure(FetchError(GEOMETRIC_MEANS_PATH, f"invalid content: {e}"))
        return FetchResult.success(means)
