from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .errors import CommandError


logger = logging.getLogger(__name__)


def run_command(command: Sequence[str], *, cwd: Path | str | None = None) -> str:
    """Run ``command`` to completion and return its stdout.

    Raises CommandError when the executable is missing or exits non-zero.
    """
    argv = list(command)
    logger.debug("running %s (cwd=%s)", " ".join(argv), cwd or ".")
    try:
        proc = subprocess.run(
            argv,
            cwd=cwd,
            check=False,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as exc:
        raise CommandError(argv, None, str(exc)) from exc
    if proc.returncode != 0:
        raise CommandError(argv, proc.returncode, proc.stderr or proc.stdout)
    return proc.stdout
