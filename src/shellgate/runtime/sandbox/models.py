"""Data models for the sandbox subsystem."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from shellgate.runtime.errors import ErrorKind

if TYPE_CHECKING:
    from shellgate.runtime.errors import GatewayError

_FALLBACK_ERROR = "Unknown error"


class ExecutionRequest(BaseModel):
    """A request to run one command through the gateway."""

    command: str = Field(..., description="Executable name or path.")
    args: list[str] = Field(default_factory=list, description="Argument vector, excluding the command.")
    cwd: str | None = Field(default=None, description="Working directory, relative to the sandbox root or absolute.")
    env: dict[str, str] = Field(default_factory=dict, description="Environment overrides for this request.")
    timeout: float | None = Field(default=None, gt=0, description="Per-request timeout in seconds.")


class ExecutionResult(BaseModel):
    """Uniform outcome of an ``execute`` call, success or failure."""

    stdout: str = Field(default="", description="Captured stdout.")
    stderr: str = Field(default="", description="Captured stderr.")
    exit_code: int = Field(..., description="Process exit code (1 for failures that never ran).")
    success: bool = Field(..., description="True iff the process exited 0 and was not killed.")
    error: str | None = Field(default=None, description="Human-readable failure description.")
    error_kind: ErrorKind | None = Field(default=None, description="Category of the failure.")
    timed_out: bool = Field(default=False, description="Whether the process was killed on timeout.")
    duration: float = Field(default=0.0, description="Wall-clock seconds spent running.")

    @classmethod
    def completed(
        cls,
        exit_code: int,
        *,
        stdout: str = "",
        stderr: str = "",
        duration: float = 0.0,
    ) -> ExecutionResult:
        """Result for a process that ran to completion on its own."""
        return cls(
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
            success=exit_code == 0,
            duration=duration,
        )

    @classmethod
    def from_error(
        cls,
        error: GatewayError,
        *,
        stdout: str = "",
        stderr: str = "",
        duration: float = 0.0,
    ) -> ExecutionResult:
        """Fold a gateway error into a failed result."""
        return cls(
            stdout=stdout,
            stderr=stderr,
            exit_code=1,
            success=False,
            error=str(error),
            error_kind=error.kind,
            timed_out=error.kind == ErrorKind.TIMEOUT,
            duration=duration,
        )

    @property
    def failure_message(self) -> str:
        """Best single-line explanation of a failure: stderr, error, or a fallback."""
        return self.stderr.strip() or self.error or _FALLBACK_ERROR

    def render(self) -> str:
        """Render for a text channel: stdout on success, ``Error: ...`` otherwise."""
        if self.success:
            return self.stdout
        return f"Error: {self.failure_message}"
