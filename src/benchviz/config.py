"""Configuration and environment handling for benchviz."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

__all__ = [
    "ViewerLimits",
    "get_source",
    "get_viewer_limits",
    "is_dev_mode",
    "reset_viewer_limits",
]

DEFAULT_PINNED_DIRECTORIES = ("sql", "sql/parser")


class ViewerLimits(BaseModel):
    """Viewer limits configuration.

    Covers the request timeout used by HTTP sources and the sizes that keep
    charts readable. All limits can be customized via environment variables.
    """

    fetch_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for a single HTTP fetch",
    )

    max_chart_points: int = Field(
        default=500,
        description="Downsample chart series using LTTB when a series is longer than this",
    )

    max_compare_series: int = Field(
        default=10,
        description="Maximum number of comparison series overlaid on one chart",
    )

    pinned_directories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PINNED_DIRECTORIES),
        description="Directories listed before all others in the benchmark index",
    )

    @classmethod
    def from_env(cls) -> "ViewerLimits":
        """Create ViewerLimits from environment variables.

        Environment variables:
        - BENCHVIZ_FETCH_TIMEOUT: HTTP fetch timeout in seconds (default: 30)
        - BENCHVIZ_MAX_CHART_POINTS: LTTB threshold for chart series (default: 500)
        - BENCHVIZ_MAX_COMPARE_SERIES: Maximum overlaid comparisons (default: 10)
        - BENCHVIZ_PINNED_DIRECTORIES: Comma-separated directories listed first (default: sql,sql/parser)
        """
        pinned = os.environ.get("BENCHVIZ_PINNED_DIRECTORIES")
        return cls(
            fetch_timeout=float(os.environ.get("BENCHVIZ_FETCH_TIMEOUT", cls.model_fields["fetch_timeout"].default)),
            max_chart_points=int(os.environ.get("BENCHVIZ_MAX_CHART_POINTS", cls.model_fields["max_chart_points"].default)),
            max_compare_series=int(os.environ.get("BENCHVIZ_MAX_COMPARE_SERIES", cls.model_fields["max_compare_series"].default)),
            pinned_directories=(
                [d.strip() for d in pinned.split(",") if d.strip()] if pinned is not None else list(DEFAULT_PINNED_DIRECTORIES)
            ),
        )


# Global viewer limits instance
_viewer_limits: ViewerLimits | None = None


def get_viewer_limits() -> ViewerLimits:
    """Get viewer limits configuration.

    Returns cached instance if already initialized.
    """
    global _viewer_limits
    if _viewer_limits is None:
        _viewer_limits = ViewerLimits.from_env()
    return _viewer_limits


def reset_viewer_limits() -> None:
    """Drop the cached limits so the next call re-reads the environment."""
    global _viewer_limits
    _viewer_limits = None


def get_source() -> str:
    """Get the location the benchmark JSON files are read from.

    Resolution priority:
    1. BENCHVIZ_SOURCE environment variable (URL or directory)
    2. XDG_DATA_HOME/benchviz (if XDG_DATA_HOME is set)
    3. ~/.local/share/benchviz (fallback)

    Returns:
        Base URL or directory path as a string.

    Examples:
        >>> os.environ["BENCHVIZ_SOURCE"] = "https://bench.example.com"
        >>> get_source()
        'https://bench.example.com'
    """
    source = os.environ.get("BENCHVIZ_SOURCE")
    if source:
        if "://" in source:
            return source
        return str(Path(source).expanduser())

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return str(Path(xdg_data_home).expanduser() / "benchviz")

    return str(Path.home() / ".local" / "share" / "benchviz")


def is_dev_mode() -> bool:
    """Check if running in development mode.

    Returns:
        True if BENCHVIZ_DEV_MODE is set to "1", False otherwise.
    """
    return os.environ.get("BENCHVIZ_DEV_MODE") == "1"
