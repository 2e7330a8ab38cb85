"""
Native Click implementation of repository-level commands.

Usage:
    fossilvc init
    fossilvc pull
    fossilvc push
"""

from __future__ import annotations

import click

from ..context import FossilVCContext
from ..decorators import handle_fossil_errors, require_checkout


@click.command("init")
@click.pass_obj
@handle_fossil_errors
def init(ctx: FossilVCContext) -> None:
    """Create a repository in the current directory and open it."""
    if ctx.has_checkout:
        raise click.ClickException(f"Already inside a fossil checkout: {ctx.repo_root}")
    ctx.vcs.create_repo(ctx.cwd)
    click.echo(f"Initialized fossil checkout in {ctx.cwd}")


@click.command("pull")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def pull(ctx: FossilVCContext) -> None:
    """Pull changes from the default remote."""
    ctx.vcs.pull(ctx.cwd)


@click.command("push")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def push(ctx: FossilVCContext) -> None:
    """Push changes to the default remote."""
    ctx.vcs.push(ctx.cwd)
