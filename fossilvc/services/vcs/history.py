"""
Revision history navigation.

Reads a file's branch log (``fossil finfo -l -b``), which lists one
revision per line, newest first, and answers neighbour queries on it.

The names follow the established front-end contract rather than
chronology: previous_revision() returns the entry listed *before* rev
(the newer one) and next_revision() the entry listed *after* it (the
older one).
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ...core.interfaces.invoker import IProcessInvoker
from ...core.models.vcs import RevisionLogEntry
from ...utils.checkout import resolve_path, working_dir_for


def parse_branch_log(text: str) -> list[RevisionLogEntry]:
    """Parse branch log output; the first token of each line is the revision id."""
    entries = []
    for line in text.splitlines():
        parts = line.split()
        if parts:
            entries.append(RevisionLogEntry(revision=parts[0], raw_line=line))
    return entries


def find_previous(entries: Sequence[RevisionLogEntry], rev: str | None) -> str | None:
    """
    Revision listed immediately before rev.

    With rev absent the first (newest) entry is returned.
    """
    if not entries:
        return None
    if rev is None:
        return entries[0].revision

    before: str | None = None
    for entry in entries:
        if entry.revision == rev:
            return before
        before = entry.revision
    return None


def find_next(entries: Sequence[RevisionLogEntry], rev: str | None) -> str | None:
    """
    Revision listed immediately after rev.

    With rev absent the last (oldest) entry is returned.
    """
    if not entries:
        return None
    if rev is None:
        return entries[-1].revision

    found = False
    for entry in entries:
        if found:
            return entry.revision
        found = entry.revision == rev
    return None


class RevisionNavigator:
    """
    Answers predecessor/successor questions about one file's history.

    Results are only meaningful within the log of a single file.
    """

    def __init__(self, invoker: IProcessInvoker) -> None:
        self.invoker = invoker

    def log_entries(self, file: str | Path) -> list[RevisionLogEntry]:
        """Fetch and parse the branch log of file, newest first."""
        output = self.invoker.run_or_empty(
            ["finfo", "-l", "-b", resolve_path(file)], cwd=working_dir_for(file)
        )
        return parse_branch_log(output)

    def previous_revision(self, file: str | Path | None, rev: str | None) -> str | None:
        """Return the revision listed before rev in file's log (the newer neighbour)."""
        if file is None:
            return None
        return find_previous(self.log_entries(file), rev)

    def next_revision(self, file: str | Path | None, rev: str | None) -> str | None:
        """Return the revision listed after rev in file's log (the older neighbour)."""
        if file is None:
            return None
        return find_next(self.log_entries(file), rev)
