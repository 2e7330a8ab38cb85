"""
Native Click implementation of the commands that change what is tracked.

Usage:
    fossilvc add FILES...
    fossilvc commit -m MESSAGE [FILES...]
    fossilvc revert FILE
    fossilvc rm FILE
    fossilvc mv OLD NEW
"""

from __future__ import annotations

import click

from ..context import FossilVCContext
from ..decorators import handle_fossil_errors, require_checkout


@click.command("add")
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.pass_obj
@require_checkout
@handle_fossil_errors
def add(ctx: FossilVCContext, files: tuple[str, ...]) -> None:
    """Put FILES under version control."""
    ctx.vcs.register([ctx.resolve(f) for f in files])


@click.command("commit")
@click.argument("files", nargs=-1, type=click.Path())
@click.option("-m", "--message", required=True, help="Check-in comment.")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def commit(ctx: FossilVCContext, files: tuple[str, ...], message: str) -> None:
    """Commit changes to FILES (every change in the checkout if none given).

    Extra flags from the checkin.extra_flags setting are passed to
    `fossil commit`.
    """
    ctx.vcs.checkin([ctx.resolve(f) for f in files], message, directory=ctx.cwd)
    click.echo("Committed.")


@click.command("revert")
@click.argument("file", type=click.Path())
@click.pass_obj
@require_checkout
@handle_fossil_errors
def revert(ctx: FossilVCContext, file: str) -> None:
    """Discard local changes to FILE."""
    ctx.vcs.revert(ctx.resolve(file))


@click.command("rm")
@click.argument("file", type=click.Path())
@click.pass_obj
@require_checkout
@handle_fossil_errors
def rm(ctx: FossilVCContext, file: str) -> None:
    """Stop tracking FILE."""
    ctx.vcs.delete_file(ctx.resolve(file))


@click.command("mv")
@click.argument("old", type=click.Path())
@click.argument("new", type=click.Path())
@click.pass_obj
@require_checkout
@handle_fossil_errors
def mv(ctx: FossilVCContext, old: str, new: str) -> None:
    """Rename tracked file OLD to NEW."""
    ctx.vcs.rename_file(ctx.resolve(old), ctx.resolve(new))
