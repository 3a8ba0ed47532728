"""Tests for the MCP tool surface."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from shellgate.protocols.mcp.models import ShellExecuteArgs, ShellTools
from shellgate.protocols.mcp.server import (
    create_server,
    handle_execute,
    handle_get_allowed_commands,
)
from shellgate.runtime.config import GatewayConfig
from shellgate.runtime.gateway import ExecutionGateway
from shellgate.runtime.sandbox.boundary import SandboxBoundary


@pytest.fixture
def gateway(tmp_path: Path) -> ExecutionGateway:
    return ExecutionGateway(
        SandboxBoundary(tmp_path),
        base_env={"PATH": os.environ.get("PATH", "/usr/bin:/bin")},
        config=GatewayConfig(allowed_commands=["echo", "ls", "sh"]),
    )


class TestShellExecuteArgs:
    def test_nulls_are_normalized(self) -> None:
        request = ShellExecuteArgs(command="ls", args=None, env=None).to_request()
        assert request.args == []
        assert request.env == {}

    def test_passes_fields_through(self) -> None:
        request = ShellExecuteArgs(
            command="git", args=["log"], cwd="repo", env={"A": "1"}, timeout=3
        ).to_request()
        assert request.command == "git"
        assert request.args == ["log"]
        assert request.cwd == "repo"
        assert request.env == {"A": "1"}
        assert request.timeout == 3.0


class TestHandleExecute:
    async def test_success_renders_stdout(self, gateway: ExecutionGateway) -> None:
        response = await handle_execute(gateway, {"command": "echo", "args": ["hello"]})
        assert response.is_error is False
        assert response.text == "hello\n"

    async def test_rejected_command(self, gateway: ExecutionGateway) -> None:
        response = await handle_execute(gateway, {"command": "curl"})
        assert response.is_error is True
        assert response.text.startswith("Error: Command not allowed: curl")

    async def test_failure_prefers_stderr(self, gateway: ExecutionGateway) -> None:
        response = await handle_execute(
            gateway, {"command": "sh", "args": ["-c", "echo broken >&2; exit 2"]}
        )
        assert response.is_error is True
        assert response.text == "Error: broken"

    async def test_sandbox_violation(self, gateway: ExecutionGateway) -> None:
        response = await handle_execute(gateway, {"command": "ls", "cwd": "../.."})
        assert response.is_error is True
        assert "outside the allowed base directory" in response.text

    async def test_invalid_arguments(self, gateway: ExecutionGateway) -> None:
        response = await handle_execute(gateway, {"args": ["x"]})
        assert response.is_error is True
        assert response.text.startswith("Error: invalid arguments")

    async def test_invalid_timeout(self, gateway: ExecutionGateway) -> None:
        response = await handle_execute(gateway, {"command": "echo", "timeout": -1})
        assert response.is_error is True


class TestHandleGetAllowedCommands:
    def test_lists_commands(self, gateway: ExecutionGateway) -> None:
        response = handle_get_allowed_commands(gateway)
        assert response.is_error is False
        assert response.text == "Available commands:\necho, ls, sh"

    def test_reflects_mutation(self, gateway: ExecutionGateway) -> None:
        gateway.allow_command("git")
        gateway.disallow_command("sh")
        assert handle_get_allowed_commands(gateway).text == "Available commands:\necho, ls, git"


class TestCreateServer:
    async def test_registers_both_tools(self, gateway: ExecutionGateway) -> None:
        server = create_server(gateway, name="test-shell")
        tools = await server.list_tools()
        assert {tool.name for tool in tools} == {
            ShellTools.EXECUTE.value,
            ShellTools.GET_ALLOWED_COMMANDS.value,
        }

    async def test_execute_tool_schema(self, gateway: ExecutionGateway) -> None:
        server = create_server(gateway)
        tools = {tool.name: tool for tool in await server.list_tools()}
        schema = tools[ShellTools.EXECUTE.value].inputSchema
        assert schema["required"] == ["command"]
        assert set(schema["properties"]) == {"command", "args", "cwd", "env", "timeout"}
