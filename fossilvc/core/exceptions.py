"""
Exception hierarchy for fossilvc.

Three families:

- FossilToolError: running the fossil executable went wrong (it could not
  be started, it hung, or it exited with an unexpected status).
- FossilParseError / FossilCheckoutNotFoundError: fossil answered, but not
  with something fossilvc can use.
- FossilUsageError: the caller passed a bad argument or config value.

Keyword arguments given to any of them are kept in ``context`` and shown
after the message, so ``str(e)`` is enough for a CLI error line.
"""

from __future__ import annotations

from typing import Any


class FossilVCException(Exception):
    """
    Base exception for all fossilvc errors.

    Attributes:
        message: Human-readable error description
        context: Keyword details given at raise time (None values dropped)
        exit_code: Exit status the CLI reports for this error
        recoverable: False when retrying cannot help
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(self, message: str, *, cause: BaseException | None = None, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


# -----------------------------------------------------------------------------
# Running fossil
# -----------------------------------------------------------------------------


class FossilToolError(FossilVCException):
    """Base class for failures running the fossil executable."""


class FossilNotFoundError(FossilToolError):
    """The executable could not be started (context: executable)."""

    exit_code = 127
    recoverable = False


class FossilTimeoutError(FossilToolError):
    """fossil did not finish in time (context: command, timeout)."""


class FossilCommandError(FossilToolError):
    """
    fossil ran but exited with an unexpected status.

    ``output`` keeps everything fossil printed; it usually names the reason.
    """

    def __init__(
        self,
        message: str,
        *,
        args: list[str] | None = None,
        returncode: int | None = None,
        output: str = "",
        cause: BaseException | None = None,
    ):
        self.args_list = list(args or [])
        self.returncode = returncode
        self.output = output
        super().__init__(
            message,
            cause=cause,
            command=" ".join(self.args_list) or None,
            returncode=returncode,
        )


class FossilCommitError(FossilCommandError):
    """fossil refused a commit."""


# -----------------------------------------------------------------------------
# Unusable answers
# -----------------------------------------------------------------------------


class FossilParseError(FossilVCException):
    """Output lacked a required field (context: field). There is no fallback."""

    recoverable = False


class FossilCheckoutNotFoundError(FossilVCException):
    """No checkout encloses the given path (context: path)."""


# -----------------------------------------------------------------------------
# Bad input
# -----------------------------------------------------------------------------


class FossilUsageError(FossilVCException, ValueError):
    """Base class for bad caller input; still catchable as ValueError."""


class ConfigValidationError(FossilUsageError):
    """Unknown config key or malformed value (context: key, value)."""


class InvalidArgumentError(FossilUsageError):
    """Bad argument to an operation (context: argument, value)."""
