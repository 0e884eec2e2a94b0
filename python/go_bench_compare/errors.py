from __future__ import annotations

from typing import Sequence


OUTPUT_DETAIL_LIMIT = 4000


class BenchCompareError(RuntimeError):
    """Base class for failures reported by go-bench-compare."""


class UsageError(BenchCompareError):
    """Malformed command line; raised before any side effect happens."""

    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.usage = usage


class CommandError(BenchCompareError):
    """An external command exited non-zero or could not be started."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        detail: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.detail = truncate_detail(detail)
        super().__init__(self._message())

    def _message(self) -> str:
        joined = " ".join(self.command)
        if self.returncode is None:
            base = f"command not found: {joined}"
        else:
            base = f"command failed (exit {self.returncode}): {joined}"
        return f"{base}: {self.detail}" if self.detail else base


class ResolutionError(CommandError):
    """A revision reference does not name a commit in the repository."""

    def __init__(
        self,
        ref: str,
        command: Sequence[str],
        returncode: int | None,
        detail: str = "",
    ) -> None:
        self.ref = ref
        super().__init__(command, returncode, detail)

    def _message(self) -> str:
        base = f"unknown revision '{self.ref}'"
        return f"{base}: {self.detail}" if self.detail else base


def truncate_detail(value: str, limit: int = OUTPUT_DETAIL_LIMIT) -> str:
    trimmed = (value or "").strip()
    if len(trimmed) <= limit:
        return trimmed
    return trimmed[-limit:]
