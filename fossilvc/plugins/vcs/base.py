"""
Base VCS provider.

Shared plumbing for command-line VCS providers: the process invoker,
the logger, and the run-or-raise helper every mutating command uses.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ...core.container import resolve_or_default
from ...core.exceptions import FossilCommandError
from ...core.interfaces.invoker import IProcessInvoker
from ...core.interfaces.logger import ILogger
from ...core.interfaces.vcs import IVCSProvider
from ...core.models.vcs import CommandResult


class BaseVCSProvider(IVCSProvider):
    """
    Abstract base class for VCS providers.

    Implements the Strategy pattern for version control operations.
    Subclasses supply _default_invoker(); collaborators are created
    lazily so plugin discovery can instantiate providers cheaply.
    """

    def __init__(
        self,
        invoker: IProcessInvoker | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._invoker = invoker
        self._logger = logger

    @property
    def invoker(self) -> IProcessInvoker:
        if self._invoker is None:
            self._invoker = resolve_or_default(IProcessInvoker, self._default_invoker)  # type: ignore[type-abstract]
        return self._invoker

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ...services.logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def _default_invoker(self) -> IProcessInvoker:
        raise NotImplementedError

    def _command(
        self,
        args: Sequence[str],
        cwd: str | Path | None = None,
        error_cls: type[FossilCommandError] = FossilCommandError,
    ) -> CommandResult:
        """
        Run a command that must succeed.

        Raises:
            FossilCommandError (or error_cls): On a non-zero exit, carrying the output
        """
        result = self.invoker.invoke(args, cwd=cwd, expected_status=0)
        if not result.exit_ok:
            self.logger.warning(
                "%s %s failed (%d): %s",
                self.name,
                " ".join(result.args),
                result.returncode,
                result.output.strip(),
            )
            raise error_cls(
                f"{self.name} {args[0]} failed",
                args=result.args,
                returncode=result.returncode,
                output=result.output,
            )
        return result
