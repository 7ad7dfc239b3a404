"""
benchviz TUI Screens
"""

from .benchmarks import BenchmarksScreen
from .compare_picker import ComparePickerScreen
from .help import HelpScreen
from .means import MeansScreen
from .plot import PlotScreen

__all__ = [
    "BenchmarksScreen",
    "ComparePickerScreen",
    "HelpScreen",
    "MeansScreen",
    "PlotScreen",
]
