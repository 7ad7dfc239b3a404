"""
BenchmarkIndex - the list of benchmark tests per directory.

This module decodes ``test_names.json`` and provides the orderings used by
the list screen and the comparison picker.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from benchviz.config import get_viewer_limits

BENCHMARK_PREFIX = "Benchmark"


class BenchmarkRef(NamedTuple):
    """A (directory, test) pair naming one benchmark series."""

    directory: str
    test: str

    @property
    def name(self) -> str:
        """Qualified name, ``directory/test``."""
        return f"{self.directory}/{self.test}"

    @classmethod
    def parse(cls, value: str) -> BenchmarkRef:
        """Parse a qualified ``directory/test`` name.

        Both parts may contain slashes: directories are package paths
        (``sql/parser``) and sub-benchmarks are named like
        ``BenchmarkScan/rows=10-8``. The test starts at the first segment
        after the directory that begins with ``Benchmark``, the prefix Go
        requires of benchmark functions. Without such a segment the test is
        the last segment.

        Raises:
            ValueError: If either part is empty.
        """
        segments = value.strip().split("/")
        if len(segments) < 2:
            raise ValueError(f"Expected 'directory/test', got {value!r}")

        split = next(
            (i for i, segment in enumerate(segments) if i > 0 and segment.startswith(BENCHMARK_PREFIX)),
            len(segments) - 1,
        )
        directory = "/".join(segments[:split])
        test = "/".join(segments[split:])
        if not directory or not test:
            raise ValueError(f"Expected 'directory/test', got {value!r}")
        return cls(directory, test)


class BenchmarkIndex:
    """Mapping of directory name to the benchmark tests it contains.

    Directory order follows the source file, except that pinned directories
    (``sql`` and ``sql/parser`` by default) always come first.
    """

    def __init__(self, tests_by_directory: Mapping[str, Iterable[str]], pinned: Iterable[str] | None = None) -> None:
        """Initialize the index.

        Args:
            tests_by_directory: Directory name to test names, as in test_names.json.
            pinned: Directories listed before all others. Defaults to the
                configured pinned directories.
        """
        self._tests: dict[str, list[str]] = {}
        for directory, tests in tests_by_directory.items():
            self._tests[directory] = sorted({t for t in tests if t})
        self._pinned = list(pinned) if pinned is not None else list(get_viewer_limits().pinned_directories)

    @classmethod
    def from_json(cls, payload: Any, pinned: Iterable[str] | None = None) -> BenchmarkIndex:
        """Decode the test_names.json object.

        Raises:
            ValueError: If payload is not a mapping of directory to list of names.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

        tests_by_directory: dict[str, list[str]] = {}
        for directory, tests in payload.items():
            if tests is None:
                tests = []
            if not isinstance(tests, list) or not all(isinstance(t, str) for t in tests):
                raise ValueError(f"Expected a list of test names for directory {directory!r}")
            tests_by_directory[directory] = tests
        return cls(tests_by_directory, pinned=pinned)

    def __contains__(self, directory: object) -> bool:
        return directory in self._tests

    def __len__(self) -> int:
        return sum(len(tests) for tests in self._tests.values())

    def directories(self) -> list[str]:
        """Directory names, pinned directories first."""
        pinned = [d for d in self._pinned if d in self._tests]
        return pinned + [d for d in self._tests if d not in pinned]

    def tests(self, directory: str) -> list[str]:
        """Sorted test names of a directory (empty for unknown directories)."""
        return list(self._tests.get(directory, []))

    def has_test(self, directory: str, test: str) -> bool:
        """Check whether a directory lists a test."""
        return test in self._tests.get(directory, [])

    def _refs(self, directories: Iterable[str], text: str) -> list[BenchmarkRef]:
        needle = text.strip().lower()
        return [
            BenchmarkRef(directory, test)
            for directory in directories
            for test in self._tests.get(directory, [])
            if needle in test.lower()
        ]

    def comparison_options(self) -> list[BenchmarkRef]:
        """Every (directory, test) pair, directories in file order, tests sorted."""
        return self._refs(self._tests, "")

    def search(self, text: str) -> list[BenchmarkRef]:
        """Case-insensitive substring search over the comparison options.

        Args:
            text: Filter text. Empty text matches everything.
        """
        return self._refs(self._tests, text)

    def listing(self, text: str = "") -> list[BenchmarkRef]:
        """Like search, but in list-screen order (pinned directories first)."""
        return self._refs(self.directories(), text)

    def to_dict(self) -> dict[str, list[str]]:
        """Ordered directory to sorted tests mapping."""
        return {directory: self.tests(directory) for directory in self.directories()}
