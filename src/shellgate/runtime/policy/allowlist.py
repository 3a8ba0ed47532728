"""CommandAllowList — the set of executable basenames permitted to run.

Pure logic, no I/O.  Membership is decided on the last path segment of the
command, so ``/usr/bin/git`` and ``git`` are the same entry.  The set keeps
insertion order for stable introspection and is guarded by a lock so that
``allow``/``disallow`` can interleave with reads from other threads.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class CommandAllowList:
    """Mutable, thread-safe allow-list of command basenames."""

    def __init__(self, commands: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        # dict keys give us an insertion-ordered set
        self._commands: dict[str, None] = dict.fromkeys(commands)

    @staticmethod
    def basename(command: str) -> str:
        """Return the last path segment of *command*."""
        return os.path.basename(command)

    def is_allowed(self, command: str) -> bool:
        """Report whether the basename of *command* is on the list."""
        name = self.basename(command)
        with self._lock:
            return name in self._commands

    def allow(self, name: str) -> None:
        """Add *name*; adding an existing entry is a no-op."""
        with self._lock:
            if name in self._commands:
                return
            self._commands[name] = None
        logger.info("Allowed command: %s", name)

    def disallow(self, name: str) -> None:
        """Remove *name*; removing a missing entry is a no-op."""
        with self._lock:
            if name not in self._commands:
                return
            del self._commands[name]
        logger.info("Disallowed command: %s", name)

    def list(self) -> list[str]:
        """Snapshot of the allowed names in insertion order."""
        with self._lock:
            return list(self._commands)

    def __contains__(self, command: object) -> bool:
        return isinstance(command, str) and self.is_allowed(command)

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands)
