"""``shellgate serve`` — expose the gateway as an MCP server over stdio."""

from __future__ import annotations

import logging

import click

from shellgate.cli_commands._output import load_gateway_or_exit, load_settings_or_exit

logger = logging.getLogger(__name__)


@click.command()
@click.option("--base-dir", "-d", default=None, help="Sandbox root (default: settings or cwd).")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--telemetry", is_flag=True, help="Enable OpenTelemetry tracing.")
@click.option("--name", default="shellgate", show_default=True, help="MCP server name.")
def serve(base_dir: str | None, config_path: str | None, telemetry: bool, name: str) -> None:
    """Run the shell tools as an MCP server on stdin/stdout."""
    from shellgate.protocols.mcp.server import create_server

    settings = load_settings_or_exit(config_path)
    gateway = load_gateway_or_exit(settings, base_dir)

    if telemetry or settings.telemetry.enabled:
        from shellgate.utils.telemetry import configure_telemetry

        endpoint = settings.telemetry.otlp_endpoint
        configure_telemetry(
            service_name=name,
            export_to_console=endpoint is None,
            otlp_endpoint=endpoint,
        )

    server = create_server(gateway, name=name)
    logger.info("Shell MCP server started (base directory: %s)", gateway.boundary.root)
    server.run()
