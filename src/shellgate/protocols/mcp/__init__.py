"""MCP (Model Context Protocol) server surface."""

from shellgate.protocols.mcp.models import ShellExecuteArgs, ShellTools, ToolResponse
from shellgate.protocols.mcp.server import (
    create_server,
    handle_execute,
    handle_get_allowed_commands,
)

__all__ = [
    "ShellExecuteArgs",
    "ShellTools",
    "ToolResponse",
    "create_server",
    "handle_execute",
    "handle_get_allowed_commands",
]
