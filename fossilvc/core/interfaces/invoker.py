"""
Process invoker interface.

The single seam through which every fossil subcommand is run. Parsers and
the command facade depend on this interface only, so tests can swap in a
recording double that serves scripted output.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from fossilvc.core.exceptions import FossilToolError
from fossilvc.core.models.vcs import CommandResult


class IProcessInvoker(ABC):
    """Runs the external tool and normalizes its result."""

    @abstractmethod
    def invoke(
        self,
        args: Sequence[str],
        cwd: str | Path | None = None,
        expected_status: int = 0,
    ) -> CommandResult:
        """
        Run the tool with ``args``.

        Args:
            args: Subcommand and its arguments (without the executable)
            cwd: Working directory for this call only
            expected_status: Exit code that counts as success

        Returns:
            CommandResult with exit_ok set iff the exit code matched
        """
        pass

    def run_or_empty(self, args: Sequence[str], cwd: str | Path | None = None) -> str:
        """
        Best-effort form of invoke().

        Returns:
            Captured output, or an empty string if the tool failed
        """
        result = self.invoke(args, cwd=cwd, expected_status=0)
        return result.output if result.exit_ok else ""

    def is_available(self) -> bool:
        """True if the tool can be run; this asks it for its ``version``."""
        try:
            return self.invoke(["version"]).exit_ok
        except FossilToolError:
            return False
