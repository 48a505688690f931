# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click

from werft_lib.core.click_format import GNUHelpColorsGroup
from werft_lib.core.config import CFG
from werft_lib.job.cli import create_job_group

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def build_cli() -> click.Group:
    """
    Build the complete werft command tree.

    Returns:
        click.Group: The root `werft` group with all subcommands attached.
    """

    @click.group(
        name=CFG.binary_name,
        cls=GNUHelpColorsGroup,
        help_options_color="bright_blue",
        invoke_without_command=True,
        context_settings=_CONTEXT_SETTINGS,
    )
    @click.option(
        "--host",
        type=str,
        default=None,
        envvar=CFG.env_vars.host,
        help=f"Address of the werft service. Defaults to '{CFG.connection.host}'.",
    )
    @click.option(
        "--version",
        is_flag=True,
        help="Print the current version of werft and exit.",
    )
    @click.pass_context
    def werft(ctx: click.Context, host: str | None, version: bool):
        """
        Run any werft command.

        werft is a client for the werft job orchestration service.
        """
        if version:
            print(__version__)
            sys.exit(0)

        ctx.ensure_object(dict)
        ctx.obj["host"] = host

        if ctx.invoked_subcommand is None:
            click.echo(ctx.get_help())
            sys.exit(0)

    werft.add_command(create_job_group())
    return werft


cli = build_cli()
