"""CLI entry point for prthreads.

Commands:
  show   — print a pull request's review comments next to the lines they refer to
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.logging import RichHandler

from prthreads_cli.commands.show import show_cmd


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


@click.group()
@click.version_option(
    version=importlib.metadata.version("prthreads"),
    prog_name="prthreads",
)
@click.option(
    "--config",
    "config_path",
    default=".prthreads.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRTHREADS_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Log git, diff and API activity.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Show GitHub review comments in the context of the code they were left on."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(show_cmd)
