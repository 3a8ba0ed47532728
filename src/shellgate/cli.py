"""shellgate CLI entrypoint."""

from __future__ import annotations

import click

from shellgate import __version__
from shellgate.utils.logs import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="shellgate")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """shellgate — allow-listed, sandboxed command execution."""
    configure_logging(verbose=verbose)


# Register subcommands
from shellgate.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
