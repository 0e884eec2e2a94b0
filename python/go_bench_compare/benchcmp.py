from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from ._process import run_command


logger = logging.getLogger(__name__)

BENCHCMP_MODULE = "golang.org/x/tools/cmd/benchcmp@latest"


class Comparer(Protocol):
    def compare(self, before_path: Path, after_path: Path) -> str: ...


class BenchCmp:
    """The ``benchcmp`` utility, installed with ``go install`` on first use."""

    def __init__(self, module: str = BENCHCMP_MODULE) -> None:
        self.module = module
        self._installed = False

    def install(self) -> None:
        if self._installed:
            return
        logger.info("installing %s", self.module)
        run_command(["go", "install", self.module])
        self._installed = True

    def executable(self) -> Path:
        gobin = run_command(["go", "env", "GOBIN"]).strip()
        if gobin:
            return Path(gobin) / "benchcmp"
        gopath = run_command(["go", "env", "GOPATH"]).strip()
        # GOPATH may list several entries; go install writes to the first.
        first = gopath.split(os.pathsep)[0] if gopath else str(Path.home() / "go")
        return Path(first) / "bin" / "benchcmp"

    def compare(self, before_path: Path, after_path: Path) -> str:
        self.install()
        return run_command([str(self.executable()), str(before_path), str(after_path)])
