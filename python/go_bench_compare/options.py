from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Sequence

from .errors import UsageError
from .runner import DEFAULT_PACKAGES


@dataclass(frozen=True)
class BenchOptions:
    before: str = "master"
    after: str = "HEAD"
    bench_time: str = "1s"
    repository: Path = Path(".")
    packages: tuple[str, ...] = DEFAULT_PACKAGES
    verbose: bool = False


class _RaisingParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=self.format_usage())


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingParser(
        prog="go-bench-compare",
        description="Runs benchmarks on two branches and compares the results",
    )
    parser.add_argument("-b", "--before", metavar="hash", default=BenchOptions.before)
    parser.add_argument("-a", "--after", metavar="hash", default=BenchOptions.after)
    parser.add_argument(
        "-t",
        "--bench_time",
        metavar="time",
        default=BenchOptions.bench_time,
        help="passed to go test -benchtime",
    )
    parser.add_argument(
        "-C",
        "--repository",
        type=Path,
        default=BenchOptions.repository,
        help="git work tree to benchmark",
    )
    parser.add_argument(
        "-p",
        "--package",
        action="append",
        dest="packages",
        metavar="pattern",
        help="Go package pattern (repeatable, default ./...)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def parse_options(argv: Sequence[str] | None = None) -> BenchOptions:
    args = build_parser().parse_args(argv)
    for field in ("before", "after", "bench_time"):
        if not getattr(args, field):
            raise UsageError(f"--{field} must not be empty")
    return BenchOptions(
        before=args.before,
        after=args.after,
        bench_time=args.bench_time,
        repository=args.repository,
        packages=tuple(args.packages) if args.packages else DEFAULT_PACKAGES,
        verbose=args.verbose,
    )
