from __future__ import annotations

import logging
import platform
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from .benchcmp import BenchCmp, Comparer
from .errors import BenchCompareError
from .git import WorkingTree
from .options import BenchOptions
from .runner import BenchmarkRunner, GoBenchRunner, run_benchmark_at


logger = logging.getLogger(__name__)


def platform_identifier() -> str:
    return f"{platform.machine() or 'unknown'}-{sys.platform}"


def run_comparison(
    options: BenchOptions,
    *,
    tree: WorkingTree | None = None,
    runner: BenchmarkRunner | None = None,
    comparer: Comparer | None = None,
    stream: TextIO | None = None,
) -> str | None:
    """Benchmark ``options.before`` then ``options.after`` and print the comparison.

    The original checkout is restored and both captured outputs are deleted on
    every exit path. Failures are printed to ``stream`` and reported as a
    ``None`` return instead of being raised.
    """
    out = stream or sys.stdout
    work_tree = tree or WorkingTree(options.repository)
    bench = runner or GoBenchRunner(options.repository, options.packages)
    cmp_tool = comparer or BenchCmp()
    captures: list[Path] = []

    try:
        with work_tree.pinned():
            before_hash = work_tree.resolve(options.before)
            after_hash = work_tree.resolve(options.after)

            print(f"benchmarking {before_hash}", file=out)
            before_path = _capture(
                "before",
                run_benchmark_at(work_tree, before_hash, options.bench_time, bench),
                captures,
            )

            print(f"benchmarking {after_hash}", file=out)
            after_path = _capture(
                "after",
                run_benchmark_at(work_tree, after_hash, options.bench_time, bench),
                captures,
            )

            comparison = cmp_tool.compare(before_path, after_path)
    except (BenchCompareError, OSError) as exc:
        logger.debug("comparison aborted: %s", exc)
        print(exc, file=out)
        return None
    finally:
        for path in captures:
            path.unlink(missing_ok=True)

    print(platform_identifier(), file=out)
    print(comparison, file=out)
    return comparison


def _capture(prefix: str, output: str, captures: list[Path]) -> Path:
    handle = tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        prefix=prefix,
        suffix=".txt",
        delete=False,
    )
    captures.append(Path(handle.name))
    with handle:
        handle.write(output)
    return Path(handle.name)
