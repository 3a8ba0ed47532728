"""Shared CLI output formatters and gateway loading."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shellgate.runtime.errors import GatewayError
from shellgate.runtime.policy.models import categorize
from shellgate.sdk.errors import ConfigError
from shellgate.sdk.loader import build_gateway, load_settings

if TYPE_CHECKING:
    from shellgate.runtime.gateway import ExecutionGateway
    from shellgate.runtime.sandbox.models import ExecutionResult
    from shellgate.sdk.models import ShellgateSettings

console = Console()
err_console = Console(stderr=True)


def load_settings_or_exit(config_path: str | None) -> ShellgateSettings:
    """Load settings, printing the error and exiting 1 on failure."""
    try:
        return load_settings(config_path)
    except ConfigError as exc:
        print_error("Configuration error", str(exc))
        sys.exit(1)


def load_gateway_or_exit(settings: ShellgateSettings, base_dir: str | None) -> ExecutionGateway:
    """Build a gateway, refusing to continue when the base directory is missing."""
    try:
        return build_gateway(settings, base_dir=base_dir)
    except GatewayError as exc:
        print_error("Error", str(exc))
        sys.exit(1)


def print_error(label: str, detail: str) -> None:
    err_console.print(f"[red]{label}:[/red] {escape(detail)}", soft_wrap=True)


def print_result(result: ExecutionResult, *, as_json: bool = False) -> None:
    """Print an execution result: raw stdout on success, an error line otherwise."""
    if as_json:
        console.print_json(result.model_dump_json())
        return

    if result.success:
        sys.stdout.write(result.stdout)
        sys.stdout.flush()
        return

    if result.stdout:
        sys.stdout.write(result.stdout)
        sys.stdout.flush()
    print_error("Error", result.failure_message)


def print_allowed_table(commands: list[str]) -> None:
    """Pretty-print allowed commands grouped by category."""
    table = Table(title="Allowed Commands")
    table.add_column("Category", style="cyan")
    table.add_column("Commands")

    for category, names in categorize(commands).items():
        table.add_row(category, ", ".join(names))

    console.print(table)
