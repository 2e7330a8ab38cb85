"""
Native Click implementation of the history commands.

Usage:
    fossilvc log FILES... [-n N]
    fossilvc neighbors FILE [REV]
"""

from __future__ import annotations

import sys

import click

from ..context import FossilVCContext
from ..decorators import handle_fossil_errors, require_checkout


@click.command("log")
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option("-n", "--limit", type=click.IntRange(min=1), help="Entries per file.")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def log(ctx: FossilVCContext, files: tuple[str, ...], limit: int | None) -> None:
    """Show the history of each FILE.

    \b
    Examples:

        fossilvc log src/main.c          # Full history
        fossilvc log -n 5 a.c b.c        # Last 5 entries of each file
    """
    ctx.vcs.print_log([ctx.resolve(f) for f in files], sys.stdout, limit=limit)


@click.command("neighbors")
@click.argument("file", type=click.Path())
@click.argument("rev", required=False)
@click.pass_obj
@require_checkout
@handle_fossil_errors
def neighbors(ctx: FossilVCContext, file: str, rev: str | None) -> None:
    """Show the revisions listed around REV in FILE's branch log.

    The log is newest first: "previous" is the entry above REV and
    "next" the entry below it. Without REV, the newest and oldest
    entries are shown.
    """
    path = ctx.resolve(file)
    previous_rev = ctx.vcs.previous_revision(path, rev)
    next_rev = ctx.vcs.next_revision(path, rev)
    click.echo(f"previous: {previous_rev or '-'}")
    click.echo(f"next:     {next_rev or '-'}")
