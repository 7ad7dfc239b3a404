"""Security validators for benchviz.

This module provides validation functions for the directory and test names
that end up in file paths and URLs, to prevent path traversal attacks.
"""

import os
import re
from pathlib import Path

__all__ = ["validate_directory_name", "validate_safe_path", "validate_test_name"]

# One path segment of a directory or a test name.
# Go benchmark names use letters, digits, underscores, hyphens, dots, and
# occasionally '=' or ',' from sub-benchmark parameters.
_SAFE_SEGMENT_PATTERN = re.compile(r"^[a-zA-Z0-9_.=,+\-]+$")


def _validate_segment(segment: str, name_type: str) -> None:
    if not segment or segment in (".", "..") or not _SAFE_SEGMENT_PATTERN.match(segment):
        raise ValueError(
            f"Invalid {name_type}. Only alphanumeric characters, underscores, hyphens, dots, '=', ',' and '+' are allowed."
        )


def validate_directory_name(directory: str) -> None:
    """Validate a benchmark directory name such as ``sql/parser``.

    Args:
        directory: Directory name from user input

    Raises:
        ValueError: If the name is empty, absolute, or has an unsafe segment

    Examples:
        >>> validate_directory_name("sql/parser")  # OK
        >>> validate_directory_name("../etc")  # Raises ValueError
    """
    if not directory or directory.startswith("/"):
        raise ValueError("Invalid directory name. Must be a non-empty relative path.")
    for segment in directory.split("/"):
        _validate_segment(segment, "directory name")


def validate_test_name(test: str) -> None:
    """Validate a benchmark test name.

    Go sub-benchmarks are named ``BenchmarkScan/rows=10-8`` and stored under
    matching subdirectories, so each slash-separated segment is checked on
    its own.

    Args:
        test: Test name from user input

    Raises:
        ValueError: If the name is empty, absolute, or has an unsafe segment

    Examples:
        >>> validate_test_name("BenchmarkInsert-8")  # OK
        >>> validate_test_name("BenchmarkScan/rows=10-8")  # OK
        >>> validate_test_name("../../passwd")  # Raises ValueError
    """
    if not test or test.startswith("/"):
        raise ValueError("Invalid test name. Must be a non-empty relative name.")
    for segment in test.split("/"):
        _validate_segment(segment, "test name")


def validate_safe_path(path: Path, base_dir: Path) -> None:
    """Validate that the resolved path is within the base directory.

    Args:
        path: Path to validate
        base_dir: Base directory that should contain the path

    Raises:
        ValueError: If path is outside base_dir or path resolution fails

    Examples:
        >>> base = Path("/data")
        >>> validate_safe_path(Path("/data/sql/BenchmarkInsert.json"), base)  # OK
        >>> validate_safe_path(Path("/data/../etc/passwd"), base)  # Raises ValueError
    """
    try:
        resolved_path = path.resolve()
        resolved_base = base_dir.resolve()
    except OSError as e:
        raise ValueError(f"Invalid path: {path}") from e

    if not str(resolved_path).startswith(str(resolved_base) + os.sep) and resolved_path != resolved_base:
        raise ValueError(f"Path {path} is outside base directory {base_dir}")
