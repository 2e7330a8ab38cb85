"""
Native Click implementation of the commands that move the checkout.

Usage:
    fossilvc cat FILE [-r REV]
    fossilvc update [FILE] [-r REV]
    fossilvc tag NAME [--branch]
    fossilvc switch NAME
"""

from __future__ import annotations

import sys

import click

from ..context import FossilVCContext
from ..decorators import handle_fossil_errors, require_checkout


@click.command("cat")
@click.argument("file", type=click.Path())
@click.option("-r", "--revision", "rev", help="Revision to show (default: working revision).")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def cat(ctx: FossilVCContext, file: str, rev: str | None) -> None:
    """Print FILE as of a revision."""
    ctx.vcs.find_revision(ctx.resolve(file), rev, sys.stdout)


@click.command("update")
@click.argument("file", required=False, type=click.Path())
@click.option("-r", "--revision", "rev", help="Revision to update to (default: tip).")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def update(ctx: FossilVCContext, file: str | None, rev: str | None) -> None:
    """Update the checkout (or just FILE) to a revision."""
    if file:
        ctx.vcs.checkout(ctx.resolve(file), rev or True)
    else:
        ctx.vcs.update(ctx.cwd, rev)


@click.command("tag")
@click.argument("name")
@click.option("--branch", is_flag=True, help="Start a branch instead of adding a tag.")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def tag(ctx: FossilVCContext, name: str, branch: bool) -> None:
    """Tag the current checkout with NAME (or branch from it)."""
    ctx.vcs.create_tag(ctx.cwd, name, branch=branch)
    click.echo(f"Created {'branch' if branch else 'tag'} {name}")


@click.command("switch")
@click.argument("name")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def switch(ctx: FossilVCContext, name: str) -> None:
    """Check out the tag or branch NAME."""
    ctx.vcs.retrieve_tag(ctx.cwd, name)
