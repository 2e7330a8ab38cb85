"""
Native Click implementation of the info command.

Usage: fossilvc info [--json]
"""

from __future__ import annotations

import json

import click

from ..context import FossilVCContext
from ..decorators import handle_fossil_errors, require_checkout


@click.command("info")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def info(ctx: FossilVCContext, as_json: bool) -> None:
    """Show the current checkout: id, time, tags and comment."""
    if as_json:
        repo_info = ctx.vcs.get_info(ctx.cwd)
        click.echo(json.dumps(repo_info.model_dump(mode="json"), indent=2))
        return

    for label, value in ctx.vcs.extra_headers(ctx.cwd):
        click.echo(f"{label + ':':<12}{value}")
