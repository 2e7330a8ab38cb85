"""
fossilvc config [list|get|set]: inspect and change .fossilvc/config.toml.
"""

import click

from ...config import config_get, config_list, config_set
from ...core.exceptions import ConfigValidationError
from ..context import FossilVCContext


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View or set configuration.

    Values live in .fossilvc/config.toml (or [tool.fossilvc] in
    pyproject.toml); FOSSILVC_SECTION__KEY variables override them.

    \b
    Examples:
        fossilvc config list
        fossilvc config get fossil.timeout
        fossilvc config set checkin.extra_flags --no-warnings
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List the keys that can be set."""
    for key, info in config_list().items():
        click.echo(f"{key} ({info['type'].__name__}, default: {info['default']})")
        click.echo(f"    {info['description']}")


@config.command("get")
@click.argument("key")
@click.pass_obj
def config_get_cmd(ctx: FossilVCContext, key: str) -> None:
    """Show the effective value of KEY (e.g. fossil.timeout)."""
    value = config_get(key, start_dir=str(ctx.cwd))
    click.echo(f"{key}: {'(not set)' if value is None else value}")


@config.command("set", context_settings={"ignore_unknown_options": True})
@click.argument("key")
@click.argument("value")
@click.pass_obj
def config_set_cmd(ctx: FossilVCContext, key: str, value: str) -> None:
    """Store VALUE for KEY; lists are given comma-separated."""
    try:
        path, typed_value = config_set(key, value, start_dir=str(ctx.cwd))
    except ConfigValidationError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Set {key} = {typed_value} in {path}")
