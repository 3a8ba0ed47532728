"""SandboxBoundary — confines working directories to a root directory.

Containment is decided per path segment (``/srv/app-other`` is *not* inside
``/srv/app``) and checked twice: once on the lexically normalized path, and
again on the symlink-resolved real path so a link inside the root cannot
point the process somewhere else.

The lexical check accepts the base directory both as given and as resolved,
so a root reached through a symlink (``/tmp`` on macOS, a linked home
directory) can still be addressed by its own spelling.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from shellgate.runtime.errors import SandboxViolationError, WorkingDirectoryNotFoundError

logger = logging.getLogger(__name__)


class SandboxBoundary:
    """The root directory outside which no execution may occur."""

    def __init__(self, base_dir: str | os.PathLike[str]) -> None:
        path = Path(base_dir)
        try:
            if not path.exists():
                raise WorkingDirectoryNotFoundError(str(path), "base directory does not exist")
            if not path.is_dir():
                raise WorkingDirectoryNotFoundError(str(path), "base directory is not a directory")
            self._root = path.resolve()
        except OSError as exc:
            raise WorkingDirectoryNotFoundError(str(path), str(exc)) from exc
        self._base = Path(os.path.abspath(path))

    @property
    def root(self) -> Path:
        """The symlink-resolved root."""
        return self._root

    @property
    def base(self) -> Path:
        """The root as it was given, made absolute and normalized."""
        return self._base

    def contains(self, path: str | os.PathLike[str]) -> bool:
        """Return ``True`` if *path* is the root or a descendant of it, under either spelling."""
        path = Path(path)
        return path.is_relative_to(self._root) or path.is_relative_to(self._base)

    def resolve(self, requested: str | None = None) -> Path:
        """Resolve *requested* against the root and enforce containment.

        Relative paths are joined onto the root; absolute paths are taken as
        given.  An absent request returns the root itself.

        Raises:
            SandboxViolationError: The path escapes the root, lexically or
                through a symlink.
            WorkingDirectoryNotFoundError: The path does not exist, is not
                a directory, or cannot be inspected.
        """
        if not requested:
            return self._root

        candidate = Path(os.path.normpath(os.path.join(self._root, requested)))
        if not self.contains(candidate):
            logger.warning("Rejected working directory outside sandbox: %s", requested)
            raise SandboxViolationError(requested, str(self._root))

        try:
            if not candidate.exists():
                raise WorkingDirectoryNotFoundError(str(candidate))
            if not candidate.is_dir():
                raise WorkingDirectoryNotFoundError(str(candidate), "not a directory")
            real = candidate.resolve()
        except OSError as exc:
            logger.warning("Cannot inspect working directory %s: %s", candidate, exc)
            raise WorkingDirectoryNotFoundError(str(candidate), str(exc)) from exc

        if not real.is_relative_to(self._root):
            logger.warning("Rejected working directory escaping via symlink: %s -> %s", requested, real)
            raise SandboxViolationError(requested, str(self._root))

        return real
