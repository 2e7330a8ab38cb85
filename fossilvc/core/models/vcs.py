"""
VCS (Version Control System) domain models.

Provides Pydantic models for the state fossilvc projects out of Fossil's
textual output: per-file status, revision log entries, checkout info and
raw command results.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import Field, computed_field

from .base import ImmutableModel

SHORT_ID_LENGTH = 9


class FileState(str, Enum):
    """Semantic state of a file relative to the current checkout."""

    UNREGISTERED = "unregistered"
    UP_TO_DATE = "up-to-date"
    EDITED = "edited"
    ADDED = "added"
    NEEDS_UPDATE = "needs-update"
    REMOVED = "removed"
    NEEDS_MERGE = "needs-merge"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class FileStatus(ImmutableModel):
    """One entry of a directory status scan.

    ``path`` is relative to the directory the scan was requested for.
    """

    path: str
    state: FileState


class RevisionLogEntry(ImmutableModel):
    """One line of a file's branch log, in emission order (newest first)."""

    revision: Annotated[str, Field(min_length=1)]
    raw_line: str


class RepoInfo(ImmutableModel):
    """Checkout information extracted from ``fossil info``."""

    checkout_id: Annotated[str, Field(min_length=1, max_length=SHORT_ID_LENGTH)]
    checkout_hash: Annotated[str, Field(min_length=1)]
    checkout_time: datetime
    tags: str
    repository: str | None = None
    comment: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tag_list(self) -> list[str]:
        """Tags split on commas, stripped."""
        return [t.strip() for t in self.tags.split(",") if t.strip()]


class CommandResult(ImmutableModel):
    """Normalized result of one Fossil invocation.

    ``exit_ok`` is true iff the process exited with the expected status.
    ``output`` holds stdout with stderr merged in.
    """

    exit_ok: bool
    output: str
    returncode: int
    args: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def lines(self) -> list[str]:
        """Output split into lines."""
        return self.output.splitlines()
