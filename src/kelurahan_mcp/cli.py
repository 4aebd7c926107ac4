"""kelurahan-mcp CLI entrypoint."""

from __future__ import annotations

import logging

import click

from kelurahan_mcp import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.version_option(version=__version__, prog_name="kelurahan-mcp")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Root logging level.",
)
def main(log_level: str) -> None:
    """kelurahan-mcp — letter generation and posting browse tools over JSON-RPC."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from kelurahan_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
