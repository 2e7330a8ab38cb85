"""
Version control system provider interface definitions.

The abstract operations a VC front-end invokes. Backends translate them
into concrete tool invocations and return structured results only.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from fossilvc.core.models.vcs import FileState, FileStatus

PathLike = str | Path


class IVCSProvider(ABC):
    """
    Interface for version control system operations.

    Implementations handle VCS-specific operations while
    conforming to this common interface.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        VCS identifier.

        Examples: 'fossil'
        """
        pass

    @abstractmethod
    def get_repo_root(self, path: PathLike | None = None) -> str | None:
        """
        Find the checkout root from path.

        Args:
            path: Directory to start searching from (default: cwd)

        Returns:
            Path to checkout root, or None if not in a checkout
        """
        pass

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @abstractmethod
    def state(self, file: PathLike) -> FileState:
        """Return the state of a single file."""
        pass

    @abstractmethod
    def working_revision(self, file: PathLike) -> str | None:
        """Return the revision the file's working copy is based on."""
        pass

    @abstractmethod
    def dir_status(
        self,
        directory: PathLike,
        files: Sequence[PathLike] | None = None,
    ) -> list[FileStatus]:
        """
        Scan a directory for tracked and untracked file states.

        Args:
            directory: Directory to scan; result paths are relative to it
            files: Restrict the scan to these files (empty means all)

        Returns:
            Tracked results first, then untracked, in emission order
        """
        pass

    @abstractmethod
    def previous_revision(self, file: PathLike | None, rev: str | None) -> str | None:
        """Return the log entry listed immediately before ``rev``."""
        pass

    @abstractmethod
    def next_revision(self, file: PathLike | None, rev: str | None) -> str | None:
        """Return the log entry listed immediately after ``rev``."""
        pass

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    @abstractmethod
    def register(self, files: Sequence[PathLike], comment: str | None = None) -> None:
        """Put files under version control."""
        pass

    @abstractmethod
    def checkin(
        self,
        files: Sequence[PathLike],
        comment: str,
        directory: PathLike | None = None,
    ) -> None:
        """Commit changes to files (every change in directory's checkout if none)."""
        pass

    @abstractmethod
    def find_revision(self, file: PathLike, rev: str | None, sink: TextIO) -> None:
        """Write the content of file at rev (working revision if empty) to sink."""
        pass

    @abstractmethod
    def checkout(
        self,
        file: PathLike | None = None,
        rev: str | bool | None = True,
        directory: PathLike | None = None,
    ) -> None:
        """Update file (or the checkout in directory), optionally pinned to a revision."""
        pass

    @abstractmethod
    def revert(self, file: PathLike, contents_done: bool = False) -> None:
        """Discard local changes to file."""
        pass

    @abstractmethod
    def diff(
        self,
        files: Sequence[PathLike],
        sink: TextIO,
        rev1: str | None = None,
        rev2: str | None = None,
        directory: PathLike | None = None,
    ) -> bool:
        """
        Write a diff of files (all changes in directory if none) to sink.

        Returns:
            True if there were differences
        """
        pass

    @abstractmethod
    def print_log(
        self,
        files: Sequence[PathLike],
        sink: TextIO,
        limit: int | None = None,
    ) -> None:
        """Write the history of each file to sink."""
        pass

    @abstractmethod
    def create_tag(self, directory: PathLike, name: str, branch: bool = False) -> None:
        """Tag (or branch from) the current checkout."""
        pass

    @abstractmethod
    def retrieve_tag(self, directory: PathLike, name: str) -> None:
        """Switch the checkout to a tag or branch."""
        pass

    @abstractmethod
    def delete_file(self, file: PathLike) -> None:
        """Remove file from version control."""
        pass

    @abstractmethod
    def rename_file(self, old: PathLike, new: PathLike) -> None:
        """Rename a tracked file."""
        pass

    def is_available(self) -> bool:
        """
        Check if this VCS is available on the system.

        Returns:
            True if the VCS tool is installed
        """
        return True
