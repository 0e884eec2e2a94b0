"""Benchmark two git revisions of a Go module and compare them with benchcmp."""

from .comparator import run_comparison
from .errors import BenchCompareError, CommandError, ResolutionError, UsageError
from .git import WorkingTree
from .options import BenchOptions, parse_options

__all__ = [
    "BenchCompareError",
    "BenchOptions",
    "CommandError",
    "ResolutionError",
    "UsageError",
    "WorkingTree",
    "parse_options",
    "run_comparison",
]
