"""``shellgate exec`` — run one command through the gateway."""

from __future__ import annotations

import asyncio
import sys

import click

from shellgate.cli_commands._output import (
    load_gateway_or_exit,
    load_settings_or_exit,
    print_error,
    print_result,
)


def _parse_env(pairs: tuple[str, ...]) -> dict[str, str]:
    env: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--env")
        env[key] = value
    return env


@click.command(
    "exec",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option("--base-dir", "-d", default=None, help="Sandbox root (default: settings or cwd).")
@click.option("--cwd", default=None, help="Working directory inside the sandbox root.")
@click.option("--env", "-e", "env_pairs", multiple=True, help="Environment override, KEY=VALUE.")
@click.option("--timeout", "-t", type=click.FloatRange(min=0, min_open=True), default=None, help="Timeout in seconds.")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON.")
@click.argument("command")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def exec_cmd(
    base_dir: str | None,
    cwd: str | None,
    env_pairs: tuple[str, ...],
    timeout: float | None,
    config_path: str | None,
    as_json: bool,
    command: str,
    args: tuple[str, ...],
) -> None:
    """Run COMMAND with ARGS inside the sandbox.

    Options must come before COMMAND; everything after it is passed through.
    """
    from pydantic import ValidationError

    from shellgate.runtime.sandbox.models import ExecutionRequest

    gateway = load_gateway_or_exit(load_settings_or_exit(config_path), base_dir)

    try:
        request = ExecutionRequest(
            command=command,
            args=list(args),
            cwd=cwd,
            env=_parse_env(env_pairs),
            timeout=timeout,
        )
    except ValidationError as exc:
        print_error("Invalid request", str(exc))
        sys.exit(1)

    result = asyncio.run(gateway.execute(request))
    print_result(result, as_json=as_json)

    if not result.success:
        sys.exit(result.exit_code if result.exit_code > 0 else 1)
