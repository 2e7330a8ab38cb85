"""
fossilvc command line: a Click group with one subcommand per VC operation.

Entry points are ``fossilvc`` (console script) and ``python -m fossilvc``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from .context import FossilVCContext

try:
    __version__ = version("fossilvc")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fossilvc")
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Run as if started in this directory.",
)
@click.pass_context
def cli(ctx: click.Context, directory: Path | None) -> None:
    """fossilvc - drive Fossil checkouts from the command line

    \b
    State:
        fossilvc status          Changed and unregistered files
        fossilvc info            Current checkout id, time and tags
        fossilvc log FILE        History of a file

    \b
    Changes:
        fossilvc add FILE        Start tracking a file
        fossilvc commit -m MSG   Commit changes

    \b
    Configuration:
        fossilvc config          View or set configuration
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = FossilVCContext.create(directory)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "FossilVCContext",
    "__version__",
    "cli",
    "register_commands",
]
