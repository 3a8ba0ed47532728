"""``shellgate allowed`` — list the commands the gateway will run."""

from __future__ import annotations

import json

import click

from shellgate.cli_commands._output import console, load_settings_or_exit, print_allowed_table


@click.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array.")
def allowed(config_path: str | None, as_json: bool) -> None:
    """List allowed commands, grouped by category."""
    from shellgate.runtime.policy.allowlist import CommandAllowList

    settings = load_settings_or_exit(config_path)
    commands = CommandAllowList(settings.gateway.allowed_commands).list()

    if as_json:
        console.print_json(json.dumps(commands))
        return

    if not commands:
        console.print("[yellow]No commands are allowed.[/yellow]")
        return

    print_allowed_table(commands)
