"""MCP tool models — tool names and argument schemas for the shell tools."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from shellgate.runtime.sandbox.models import ExecutionRequest


class ShellTools(str, Enum):
    """Names of the tools registered on the MCP server."""

    EXECUTE = "shell_execute"
    GET_ALLOWED_COMMANDS = "shell_get_allowed_commands"


class ShellExecuteArgs(BaseModel):
    """Arguments accepted by ``shell_execute``.

    MCP clients may send ``null`` for optional collections, so ``args`` and
    ``env`` accept ``None`` and are normalized in :meth:`to_request`.
    """

    command: str = Field(..., description="Command to run (basename must be allowed).")
    args: list[str] | None = Field(default=None, description="Command arguments as an array.")
    cwd: str | None = Field(default=None, description="Working directory inside the base directory.")
    env: dict[str, str] | None = Field(default=None, description="Extra environment variables.")
    timeout: float | None = Field(default=None, gt=0, description="Timeout in seconds.")

    def to_request(self) -> ExecutionRequest:
        return ExecutionRequest(
            command=self.command,
            args=self.args or [],
            cwd=self.cwd,
            env=self.env or {},
            timeout=self.timeout,
        )


class ToolResponse(BaseModel):
    """Rendered text of a tool call and whether it represents an error."""

    text: str
    is_error: bool = False
