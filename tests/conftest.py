"""
Shared pytest fixtures for fossilvc tests.

This module provides:
- FakeInvoker: a recording process invoker that serves scripted output
- fake_invoker: a fresh FakeInvoker per test
- checkout: a directory laid out like a fossil checkout (marker file only)
- clean_container: resets the global service container around each test
"""

from collections.abc import Sequence
from pathlib import Path

import pytest

from fossilvc.core.bootstrap import reset
from fossilvc.core.interfaces.invoker import IProcessInvoker
from fossilvc.core.models.vcs import CommandResult


class FakeInvoker(IProcessInvoker):
    """
    Process invoker double.

    Every call is recorded as (args, cwd). Output is served from responses
    registered with respond(); the longest matching argument prefix wins.
    Unmatched calls succeed with empty output.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], str | None]] = []
        self._responses: list[tuple[tuple[str, ...], str, int]] = []

    def respond(self, *prefix: str, output: str = "", returncode: int = 0) -> None:
        self._responses.append((tuple(prefix), output, returncode))

    def invoke(
        self,
        args: Sequence[str],
        cwd: str | Path | None = None,
        expected_status: int = 0,
    ) -> CommandResult:
        str_args = [str(a) for a in args]
        self.calls.append((str_args, None if cwd is None else str(cwd)))

        output, returncode = "", 0
        for prefix, out, rc in sorted(self._responses, key=lambda r: len(r[0]), reverse=True):
            if tuple(str_args[: len(prefix)]) == prefix:
                output, returncode = out, rc
                break

        return CommandResult(
            exit_ok=returncode == expected_status,
            output=output,
            returncode=returncode,
            args=str_args,
        )

    @property
    def commands(self) -> list[list[str]]:
        """Just the argument lists, in call order."""
        return [args for args, _cwd in self.calls]


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    """Provide a fresh recording invoker."""
    return FakeInvoker()


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    """
    Create a directory that looks like a fossil checkout root.

    Layout:
        repo/.fslckout
        repo/sub/

    Returns:
        Resolved path of the checkout root
    """
    root = tmp_path / "repo"
    (root / "sub").mkdir(parents=True)
    (root / ".fslckout").write_bytes(b"")
    return root.resolve()


@pytest.fixture(autouse=True)
def clean_container():
    """Reset the global service container before and after each test."""
    reset()
    yield
    reset()
