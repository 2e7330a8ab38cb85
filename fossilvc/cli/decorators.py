"""
Click decorators shared by fossilvc commands.

Both expect the FossilVCContext as first argument, so they go below
@click.pass_obj:

    @click.command()
    @click.pass_obj
    @require_checkout
    @handle_fossil_errors
    def status(ctx: FossilVCContext): ...
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import FossilCommandError, FossilVCException

if TYPE_CHECKING:
    from .context import FossilVCContext

F = TypeVar("F", bound=Callable[..., Any])


def _context_of(args: tuple[Any, ...], kwargs: dict[str, Any]) -> FossilVCContext:
    ctx = args[0] if args else kwargs.get("ctx")
    if ctx is None:
        raise click.ClickException(
            "Internal error: no FossilVCContext; is @click.pass_obj missing?"
        )
    return ctx


def require_checkout(f: F) -> F:
    """Fail with a hint unless the command runs inside a fossil checkout."""

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = _context_of(args, kwargs)
        if not ctx.has_checkout:
            raise click.ClickException(
                f"Not in a fossil checkout: {ctx.cwd}\n"
                "Run 'fossil open' or 'fossilvc init' first."
            )
        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def _message_for(error: FossilVCException) -> str:
    message = str(error)
    if isinstance(error, FossilCommandError):
        output = error.output.strip()
        if output:
            message = f"{message}\n{output}"
    return message


def handle_fossil_errors(f: F) -> F:
    """
    Report FossilVCException as a ClickException.

    The exception's exit_code becomes the process exit code; for failed
    fossil commands the captured output is appended to the message.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except FossilVCException as e:
            error = click.ClickException(_message_for(e))
            error.exit_code = e.exit_code
            raise error from e

    return wrapper  # type: ignore[return-value]
