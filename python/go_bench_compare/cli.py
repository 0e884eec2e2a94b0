from __future__ import annotations

import logging
import sys
from typing import Sequence

from .comparator import run_comparison
from .errors import UsageError
from .options import parse_options


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    try:
        options = parse_options(argv)
    except UsageError as exc:
        if exc.usage:
            sys.stderr.write(exc.usage)
        print(f"go-bench-compare: error: {exc}", file=sys.stderr)
        return 2

    configure_logging(options.verbose)
    comparison = run_comparison(options)
    return 0 if comparison is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
