"""
benchviz Terminal UI

A terminal dashboard using the Textual framework for browsing benchmark
tests and their nightly history charts.
"""

from __future__ import annotations

import logging


def run_tui(source: str | None = None) -> None:
    """Run the benchviz TUI application.

    Args:
        source: Base URL or directory of the JSON files. Defaults to BENCHVIZ_SOURCE.
    """
    from textual.logging import TextualHandler

    from benchviz.logger import setup_logger
    from benchviz.tui.app import BenchvizTUIApp

    setup_logger(logging.INFO, handler=TextualHandler())

    app = BenchvizTUIApp(source=source)
    app.run()


__all__ = ["run_tui"]
