from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ._process import run_command
from .errors import CommandError, ResolutionError


logger = logging.getLogger(__name__)


class WorkingTree:
    """Handle on the checked-out revision of a git work tree."""

    def __init__(self, repository: Path | str = ".") -> None:
        self.repository = Path(repository)

    def current_ref(self) -> str:
        name = self._git(["rev-parse", "--abbrev-ref", "HEAD"]).strip()
        if name == "HEAD":
            # Detached: --abbrev-ref gives no branch to return to.
            return self._git(["rev-parse", "HEAD"]).strip()
        return name

    def resolve(self, ref: str) -> str:
        args = ["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"]
        try:
            return self._git(args).strip()
        except CommandError as exc:
            raise ResolutionError(ref, exc.command, exc.returncode, exc.detail) from exc

    def checkout(self, identifier: str) -> None:
        logger.info("checking out %s", identifier)
        self._git(["checkout", "--quiet", identifier])

    @contextmanager
    def pinned(self) -> Iterator[str]:
        """Yield the current ref and check it out again on every exit path."""
        original = self.current_ref()
        logger.debug("pinned original checkout %s", original)
        try:
            yield original
        except BaseException as exc:
            try:
                self.checkout(original)
            except CommandError as restore_exc:
                raise CommandError(
                    restore_exc.command,
                    restore_exc.returncode,
                    f"{restore_exc.detail}; interrupted run failed: {exc}",
                ) from exc
            raise
        self.checkout(original)

    def _git(self, args: list[str]) -> str:
        return run_command(["git", "-C", str(self.repository), *args])
