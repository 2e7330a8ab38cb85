"""
Native Click implementation of diff and annotate.

Usage:
    fossilvc diff [FILES...] [--from R1] [--to R2]
    fossilvc annotate FILE [-r REV]
"""

from __future__ import annotations

import sys

import click

from ..context import FossilVCContext
from ..decorators import handle_fossil_errors, require_checkout


@click.command("diff")
@click.argument("files", nargs=-1, type=click.Path())
@click.option("--from", "rev1", help="Older revision (default: working revision).")
@click.option("--to", "rev2", help="Newer revision (default: working files).")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def diff(ctx: FossilVCContext, files: tuple[str, ...], rev1: str | None, rev2: str | None) -> None:
    """Show changes to FILES.

    Exits with status 1 when there are differences, like diff(1).
    """
    changed = ctx.vcs.diff(
        [ctx.resolve(f) for f in files], sys.stdout, rev1=rev1, rev2=rev2, directory=ctx.cwd
    )
    if changed:
        raise SystemExit(1)


@click.command("annotate")
@click.argument("file", type=click.Path())
@click.option("-r", "--revision", "rev", help="Revision to annotate.")
@click.pass_obj
@require_checkout
@handle_fossil_errors
def annotate(ctx: FossilVCContext, file: str, rev: str | None) -> None:
    """Show which check-in last changed each line of FILE."""
    ctx.vcs.annotate(ctx.resolve(file), sys.stdout, rev=rev)
