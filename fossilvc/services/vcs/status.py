"""
File status translation and directory status scanning.

Fossil reports file state as short uppercase tokens (``EDITED``,
``ADDED``, ...). This module maps those tokens onto FileState and merges
``fossil update -n -v current`` with ``fossil extras --dotfiles`` into a
single ordered scan result.
"""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from pathlib import Path

from ...core.exceptions import FossilCheckoutNotFoundError
from ...core.interfaces.invoker import IProcessInvoker
from ...core.models.vcs import FileState, FileStatus
from ...utils.checkout import find_checkout_root, reroot

# Lossy on purpose: CONFLICT reads as edited, ADD and UPDATE both need an update
STATUS_CODES: dict[str, FileState] = {
    "UNKNOWN": FileState.UNREGISTERED,
    "UNCHANGED": FileState.UP_TO_DATE,
    "CONFLICT": FileState.EDITED,
    "ADDED": FileState.ADDED,
    "ADD": FileState.NEEDS_UPDATE,
    "EDITED": FileState.EDITED,
    "REMOVE": FileState.REMOVED,
    "UPDATE": FileState.NEEDS_UPDATE,
    "MERGE": FileState.NEEDS_MERGE,
}

_SEPARATOR = re.compile(r"-{2,}")


def translate_status(token: str | None) -> FileState:
    """
    Map a raw fossil status token to a FileState.

    Matching is exact and case-sensitive. ``None`` means the file was
    not reported as tracked at all. Unrecognized tokens map to UNKNOWN.
    """
    if token is None:
        return FileState.UNREGISTERED
    return STATUS_CODES.get(token, FileState.UNKNOWN)


def parse_update_output(text: str) -> list[tuple[str, str]]:
    """
    Parse ``fossil update -n -v current`` output.

    Each line is ``<TOKEN> <path>``. Parsing stops at the first line whose
    token contains a run of dashes (the separator before the summary).

    Returns:
        (token, root-relative path) pairs in emission order
    """
    entries: list[tuple[str, str]] = []
    for line in text.splitlines():
        parts = line.split(None, 1)
        if not parts:
            continue
        token = parts[0]
        if _SEPARATOR.search(token):
            break
        if len(parts) < 2:
            continue
        entries.append((token, parts[1]))
    return entries


def parse_extras_output(text: str) -> list[str]:
    """Parse ``fossil extras`` output: one bare path per non-blank line."""
    return [line for line in text.splitlines() if line.strip()]


class DirectoryStatusScanner:
    """
    Scans a directory for tracked and untracked file states.

    Usage:
        scanner = DirectoryStatusScanner(invoker)
        for status in scanner.scan("/path/to/checkout/sub"):
            print(status.path, status.state)
    """

    def __init__(self, invoker: IProcessInvoker) -> None:
        self.invoker = invoker

    def scan(
        self,
        directory: str | Path,
        files: Sequence[str | Path] | None = None,
        root: str | Path | None = None,
    ) -> list[FileStatus]:
        """
        Scan directory (or just files within it).

        Args:
            directory: Directory to scan; result paths are relative to it
            files: Restrict the scan to these files (relative to directory); empty means all
            root: Checkout root (discovered from directory if not given)

        Returns:
            Tracked results first, then untracked, both in emission order

        Raises:
            FossilCheckoutNotFoundError: If no checkout encloses directory
        """
        directory = os.path.abspath(os.fspath(directory))
        if root is None:
            found = find_checkout_root(directory)
            if found is None:
                raise FossilCheckoutNotFoundError("Not inside a fossil checkout", path=directory)
            root = found

        # extras prints cwd-relative paths, so both commands run from the root
        root = os.fspath(root)
        paths = [os.path.join(directory, f) for f in files] if files else [directory]

        tracked = self.invoker.run_or_empty(
            ["update", "-n", "-v", "current", *paths], cwd=root
        )
        result = [
            FileStatus(path=reroot(path, root, directory), state=translate_status(token))
            for token, path in parse_update_output(tracked)
        ]

        extras = self.invoker.run_or_empty(["extras", "--dotfiles", *paths], cwd=root)
        result.extend(
            FileStatus(path=reroot(path, root, directory), state=translate_status(None))
            for path in parse_extras_output(extras)
        )
        return result
