"""
Native Click implementation of the status queries.

Usage:
    fossilvc status [FILES...]
    fossilvc state FILE
    fossilvc revision FILE
"""

from __future__ import annotations

import click

from ...core.models.vcs import FileState
from ..context import FossilVCContext
from ..decorators import handle_fossil_errors, require_checkout


@click.command("status")
@click.argument("files", nargs=-1, type=click.Path())
@click.option("--all", "show_all", is_flag=True, help="Include up-to-date files.")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def status(ctx: FossilVCContext, files: tuple[str, ...], show_all: bool) -> None:
    """Show the state of files under the current directory.

    Tracked files are listed first, then files fossil does not know about.
    Paths are relative to the current directory.

    \b
    Examples:

        fossilvc status              # Changed and unregistered files
        fossilvc status --all        # Include up-to-date files
        fossilvc status src/a.c      # Only these files
    """
    paths = [ctx.resolve(f) for f in files]
    entries = ctx.vcs.dir_status(ctx.cwd, paths or None)

    shown = 0
    for entry in entries:
        if entry.state == FileState.UP_TO_DATE and not show_all:
            continue
        click.echo(f"{entry.state:<14}{entry.path}")
        shown += 1

    if shown == 0:
        click.echo("Nothing to report.")


@click.command("state")
@click.argument("file", type=click.Path())
@click.pass_obj
@require_checkout
@handle_fossil_errors
def state(ctx: FossilVCContext, file: str) -> None:
    """Show the state of a single FILE."""
    click.echo(str(ctx.vcs.state(ctx.resolve(file))))


@click.command("revision")
@click.argument("file", type=click.Path())
@click.pass_obj
@require_checkout
@handle_fossil_errors
def revision(ctx: FossilVCContext, file: str) -> None:
    """Show the revision FILE's working copy is based on."""
    rev = ctx.vcs.working_revision(ctx.resolve(file))
    if rev is None:
        raise click.ClickException(f"{file} is not registered")
    click.echo(rev)
