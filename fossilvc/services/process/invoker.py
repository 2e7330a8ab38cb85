"""
Process invoker for the fossil executable.

Runs one fossil subcommand per call, with the working directory passed
explicitly, and normalizes the outcome into a CommandResult.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ...core.exceptions import FossilNotFoundError, FossilTimeoutError
from ...core.interfaces.invoker import IProcessInvoker
from ...core.interfaces.logger import ILogger
from ...core.models.vcs import CommandResult

DEFAULT_EXECUTABLE = "fossil"
DEFAULT_TIMEOUT = 60.0


def _get_logger() -> ILogger:
    from ...core.container import resolve_or_default
    from ..logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


class ProcessInvoker(IProcessInvoker):
    """
    Runs ``fossil <args>`` as a blocking subprocess.

    stdout is captured as text with stderr merged into it. A bounded
    timeout guards against an unresponsive tool.

    Usage:
        invoker = ProcessInvoker()
        result = invoker.invoke(["info"], cwd="/path/to/checkout")
        if result.exit_ok:
            print(result.output)
    """

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        timeout: float | None = DEFAULT_TIMEOUT,
        logger: ILogger | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            self._logger = _get_logger()
        return self._logger

    def invoke(
        self,
        args: Sequence[str],
        cwd: str | Path | None = None,
        expected_status: int = 0,
    ) -> CommandResult:
        """
        Run the fossil executable with ``args``.

        Args:
            args: Subcommand and its arguments
            cwd: Working directory for this call (None: the current directory)
            expected_status: Exit code that counts as success

        Returns:
            CommandResult with exit_ok iff the exit code matched

        Raises:
            FossilNotFoundError: If the executable cannot be launched
            FossilTimeoutError: If the process exceeds the timeout
        """
        str_args = [str(a) for a in args]
        cmd = [self.executable, *str_args]
        command_line = shlex.join(cmd)
        self.logger.debug("Running %s (cwd=%s)", command_line, cwd or ".")

        try:
            proc = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd is not None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FossilNotFoundError(
                f"Cannot run {self.executable}: executable not found",
                executable=self.executable,
                cause=e,
            ) from e
        except subprocess.TimeoutExpired as e:
            raise FossilTimeoutError(
                f"{command_line} timed out",
                command=command_line,
                timeout=self.timeout,
                cause=e,
            ) from e
        except OSError as e:
            raise FossilNotFoundError(
                f"Cannot run {self.executable}: {e}",
                executable=self.executable,
                cause=e,
            ) from e

        exit_ok = proc.returncode == expected_status
        if not exit_ok:
            self.logger.debug(
                "%s exited with %d (expected %d)", command_line, proc.returncode, expected_status
            )

        return CommandResult(
            exit_ok=exit_ok,
            output=proc.stdout or "",
            returncode=proc.returncode,
            args=str_args,
        )

    def is_available(self) -> bool:
        """Check that the executable is installed and answers ``version``."""
        if shutil.which(self.executable) is None:
            return False
        return super().is_available()
