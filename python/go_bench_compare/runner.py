from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence

from ._process import run_command


logger = logging.getLogger(__name__)

DEFAULT_PACKAGES = ("./...",)


class CheckoutTarget(Protocol):
    def checkout(self, identifier: str) -> None: ...


class BenchmarkRunner(Protocol):
    def run(self, bench_time: str) -> str: ...


def benchmark_command(bench_time: str, packages: Sequence[str] = DEFAULT_PACKAGES) -> list[str]:
    # -run '^$' matches no test so only benchmarks execute.
    return [
        "go",
        "test",
        "-run",
        "^$",
        "-bench",
        ".",
        "-benchmem",
        "-benchtime",
        bench_time,
        *packages,
    ]


class GoBenchRunner:
    def __init__(
        self,
        repository: Path | str = ".",
        packages: Sequence[str] = DEFAULT_PACKAGES,
    ) -> None:
        self.repository = Path(repository)
        self.packages = tuple(packages) or DEFAULT_PACKAGES

    def run(self, bench_time: str) -> str:
        return run_command(benchmark_command(bench_time, self.packages), cwd=self.repository)


def run_benchmark_at(
    tree: CheckoutTarget,
    revision: str,
    bench_time: str,
    runner: BenchmarkRunner,
) -> str:
    """Check out ``revision`` in ``tree`` and return the raw benchmark output."""
    tree.checkout(revision)
    output = runner.run(bench_time)
    logger.debug("captured %d bytes of benchmark output for %s", len(output), revision)
    return output
