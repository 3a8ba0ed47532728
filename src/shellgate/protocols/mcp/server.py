"""MCP server exposing the execution gateway as two tools.

- ``shell_execute`` — run an allow-listed command inside the sandbox root.
- ``shell_get_allowed_commands`` — list what ``shell_execute`` will accept.

The handlers are plain coroutines so the rendering rules can be exercised
without a transport; :func:`create_server` only wires them into FastMCP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import ValidationError

from shellgate.protocols.mcp.models import ShellExecuteArgs, ShellTools, ToolResponse

if TYPE_CHECKING:
    from shellgate.runtime.gateway import ExecutionGateway

logger = logging.getLogger(__name__)

EXECUTE_DESCRIPTION = (
    "Executes shell commands for development operations. This tool allows running "
    "package managers (npm, yarn, bun), version control (git), file operations "
    "(ls, mkdir, cp), and development tools (node, python, tsc). Use it to install "
    "dependencies, initialize projects, compile code, or manipulate files. Commands "
    "run without a shell, restricted to an allow-list and confined to the base "
    "directory. Provide the base command name plus optional arguments, working "
    "directory, environment variables, and timeout in seconds."
)

ALLOWED_COMMANDS_DESCRIPTION = (
    "Retrieves the list of shell commands that shell_execute is allowed to run. "
    "Use it to check which commands are available before calling shell_execute."
)


async def handle_execute(gateway: ExecutionGateway, arguments: dict[str, Any]) -> ToolResponse:
    """Validate tool arguments, run them through *gateway*, and render the result."""
    try:
        request = ShellExecuteArgs.model_validate(arguments).to_request()
    except ValidationError as exc:
        return ToolResponse(text=f"Error: invalid arguments: {exc}", is_error=True)

    result = await gateway.execute(request)
    return ToolResponse(text=result.render(), is_error=not result.success)


def handle_get_allowed_commands(gateway: ExecutionGateway) -> ToolResponse:
    commands = gateway.get_allowed_commands()
    return ToolResponse(text=f"Available commands:\n{', '.join(commands)}")


def create_server(gateway: ExecutionGateway, *, name: str = "shellgate") -> FastMCP:
    """Build a FastMCP server whose tools delegate to *gateway*."""
    server = FastMCP(name)

    @server.tool(name=ShellTools.EXECUTE.value, description=EXECUTE_DESCRIPTION)
    async def shell_execute(
        command: str,
        args: list[str] | None = None,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> str:
        response = await handle_execute(
            gateway,
            {"command": command, "args": args, "cwd": cwd, "env": env, "timeout": timeout},
        )
        if response.is_error:
            raise ToolError(response.text)
        return response.text

    @server.tool(name=ShellTools.GET_ALLOWED_COMMANDS.value, description=ALLOWED_COMMANDS_DESCRIPTION)
    async def shell_get_allowed_commands() -> str:
        return handle_get_allowed_commands(gateway).text

    logger.debug("Registered MCP tools: %s", ", ".join(t.value for t in ShellTools))
    return server
