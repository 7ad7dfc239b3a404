"""Utility modules for benchviz."""

from benchviz.utils.validators import (
    validate_directory_name,
    validate_safe_path,
    validate_test_name,
)

__all__ = [
    "validate_directory_name",
    "validate_safe_path",
    "validate_test_name",
]
