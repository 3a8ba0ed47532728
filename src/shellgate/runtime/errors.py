"""Shared error types for the execution gateway.

Every error carries an :class:`ErrorKind` so it can be folded into an
:class:`~shellgate.runtime.sandbox.models.ExecutionResult` without losing
its category.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ErrorKind(str, Enum):
    """Category of a failed execution."""

    VALIDATION = "validation"
    SANDBOX_VIOLATION = "sandbox_violation"
    NOT_FOUND = "not_found"
    SPAWN = "spawn"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


class GatewayError(Exception):
    """Base error for all gateway failures."""

    kind: ErrorKind = ErrorKind.INTERNAL


class RequestValidationError(GatewayError):
    """The request itself is malformed (e.g. empty command)."""

    kind = ErrorKind.VALIDATION


class CommandNotAllowedError(RequestValidationError):
    """The command's basename is not on the allow-list."""

    def __init__(self, command: str, allowed: Iterable[str] = ()) -> None:
        self.command = command
        self.allowed = list(allowed)
        super().__init__(
            f"Command not allowed: {command}. "
            f"Allowed commands: {', '.join(self.allowed) or '(none)'}"
        )


class SandboxViolationError(GatewayError):
    """A working directory resolved outside the sandbox root."""

    kind = ErrorKind.SANDBOX_VIOLATION

    def __init__(self, requested: str, root: str) -> None:
        self.requested = requested
        self.root = root
        super().__init__(
            f"Working directory {requested} is outside the allowed base directory {root}"
        )


class WorkingDirectoryNotFoundError(GatewayError):
    """A working directory (or the sandbox root) does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, detail: str = "directory does not exist") -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Working directory not found: {path} ({detail})")


class SpawnError(GatewayError):
    """The operating system failed to start the process."""

    kind = ErrorKind.SPAWN

    def __init__(self, command: str, detail: str = "") -> None:
        self.command = command
        self.detail = detail
        super().__init__(
            f"Failed to start process {command}" + (f": {detail}" if detail else "")
        )


class ExecutionTimeoutError(GatewayError):
    """The process exceeded its allotted time and was killed."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Command timed out after {timeout}s")
