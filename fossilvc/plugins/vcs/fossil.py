"""
Fossil VCS provider.

Translates the abstract VC operations into fossil subcommands and answers
the front-end's state queries through the status, history and info
parsers. Every invocation carries an explicit working directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ...core.container import resolve_or_default
from ...core.exceptions import FossilCommitError, InvalidArgumentError
from ...core.interfaces.invoker import IProcessInvoker
from ...core.interfaces.logger import ILogger
from ...core.models.vcs import FileState, FileStatus, RepoInfo
from ...core.settings import FossilVCSettings, load_settings
from ...services.process.invoker import ProcessInvoker
from ...services.vcs.history import RevisionNavigator
from ...services.vcs.info import RepoInfoExtractor
from ...services.vcs.status import (
    DirectoryStatusScanner,
    parse_update_output,
    translate_status,
)
from ...utils.checkout import find_checkout_root, resolve_path, working_dir_for
from .base import BaseVCSProvider

PathLike = str | Path

# finfo -s prints this for files fossil does not track
UNREGISTERED_PREFIX = "unknown"


def _run_dir(files: Sequence[PathLike], directory: PathLike | None) -> PathLike:
    """Working directory for a command over files, or over directory when there are none."""
    if files:
        return working_dir_for(files[0])
    if directory is None:
        raise InvalidArgumentError(
            "Either files or a directory is required", argument="directory"
        )
    return directory


class FossilVCSProvider(BaseVCSProvider):
    """
    Fossil version control provider.

    Usage:
        fossil = FossilVCSProvider()
        for status in fossil.dir_status("/path/to/checkout"):
            print(status.path, status.state)
        fossil.checkin(["a.txt"], "Fix typo")
    """

    def __init__(
        self,
        invoker: IProcessInvoker | None = None,
        settings: FossilVCSettings | None = None,
        logger: ILogger | None = None,
    ) -> None:
        super().__init__(invoker=invoker, logger=logger)
        self._settings = settings

    @property
    def name(self) -> str:
        return "fossil"

    @property
    def settings(self) -> FossilVCSettings:
        if self._settings is None:
            self._settings = resolve_or_default(FossilVCSettings, load_settings)
        return self._settings

    def _default_invoker(self) -> IProcessInvoker:
        return ProcessInvoker(
            executable=self.settings.fossil.executable,
            timeout=self.settings.fossil.timeout,
            logger=self.logger,
        )

    @property
    def scanner(self) -> DirectoryStatusScanner:
        return DirectoryStatusScanner(self.invoker)

    @property
    def navigator(self) -> RevisionNavigator:
        return RevisionNavigator(self.invoker)

    @property
    def info(self) -> RepoInfoExtractor:
        return RepoInfoExtractor(self.invoker)

    def is_available(self) -> bool:
        """Check if fossil is installed and runs."""
        return self.invoker.is_available()

    # -------------------------------------------------------------------------
    # Repository discovery
    # -------------------------------------------------------------------------

    def get_repo_root(self, path: PathLike | None = None) -> str | None:
        """Get the fossil checkout root directory."""
        root = find_checkout_root(path)
        return str(root) if root else None

    def responsible_p(self, path: PathLike) -> bool:
        """True if path lies inside a fossil checkout."""
        return self.get_repo_root(path) is not None

    def create_repo(self, directory: PathLike) -> None:
        """Create a repository file in directory and open a checkout of it there."""
        repo_file = str(Path(directory).absolute() / ".fossil")
        self._command(["new", repo_file], cwd=directory)
        self._command(["open", "--force", repo_file], cwd=directory)
        self.logger.info("Created fossil repository %s", repo_file)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _file_info(self, file: PathLike) -> list[str]:
        """Whitespace-split first line of ``finfo -s``, or [] on failure."""
        output = self.invoker.run_or_empty(
            ["finfo", "-s", resolve_path(file)], cwd=working_dir_for(file)
        )
        lines = output.splitlines()
        return lines[0].split() if lines else []

    def registered(self, file: PathLike) -> bool:
        """Check if fossil tracks file."""
        fields = self._file_info(file)
        return bool(fields) and not fields[0].startswith(UNREGISTERED_PREFIX)

    def working_revision(self, file: PathLike) -> str | None:
        """Revision the working copy of file is based on."""
        fields = self._file_info(file)
        if len(fields) < 2 or fields[0].startswith(UNREGISTERED_PREFIX):
            return None
        return fields[1]

    def state(self, file: PathLike) -> FileState:
        """State of a single file."""
        output = self.invoker.run_or_empty(
            ["update", "-n", "-v", "current", resolve_path(file)], cwd=working_dir_for(file)
        )
        entries = parse_update_output(output)
        return translate_status(entries[0][0] if entries else None)

    def workfile_unchanged(self, file: PathLike) -> bool:
        """True if file matches the checked-out revision."""
        return self.state(file) == FileState.UP_TO_DATE

    def dir_status(
        self,
        directory: PathLike,
        files: Sequence[PathLike] | None = None,
    ) -> list[FileStatus]:
        """Scan directory; result paths are relative to it."""
        return self.scanner.scan(directory, files)

    def previous_revision(self, file: PathLike | None, rev: str | None) -> str | None:
        """Revision listed before rev in file's branch log."""
        return self.navigator.previous_revision(file, rev)

    def next_revision(self, file: PathLike | None, rev: str | None) -> str | None:
        """Revision listed after rev in file's branch log."""
        return self.navigator.next_revision(file, rev)

    def get_info(self, directory: PathLike) -> RepoInfo:
        """Checkout information for directory."""
        return self.info.get_info(directory)

    def get_checkout_id(self, directory: PathLike) -> str:
        """Short id of the checkout in directory."""
        return self.info.get_checkout_id(directory)

    def extra_headers(self, directory: PathLike) -> list[tuple[str, str]]:
        """Header fields describing the checkout in directory."""
        return self.info.extra_headers(directory)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def register(self, files: Sequence[PathLike], comment: str | None = None) -> None:
        """Add files. fossil records no per-add comment, so comment is ignored."""
        if not files:
            return
        self._command(["add", *map(resolve_path, files)], cwd=working_dir_for(files[0]))

    def checkin(
        self,
        files: Sequence[PathLike],
        comment: str,
        directory: PathLike | None = None,
    ) -> None:
        """
        Commit files, or every change in the checkout of directory if files is empty.

        Raises:
            InvalidArgumentError: If comment is empty, or neither files nor directory is given
            FossilCommitError: If fossil rejects the commit; output holds the reason
        """
        if not comment or not comment.strip():
            raise InvalidArgumentError("A commit message is required", argument="comment")

        args = ["commit", "-m", comment, *self.settings.checkin.extra_flags]
        args.extend(map(resolve_path, files))
        self._command(args, cwd=_run_dir(files, directory), error_cls=FossilCommitError)
        self.logger.info("Committed %d file(s)", len(files))

    def find_revision(self, file: PathLike, rev: str | None, sink: TextIO) -> None:
        """Write file's content at rev (working revision when rev is empty) to sink."""
        args = ["cat", resolve_path(file)]
        if rev:
            args.extend(["-r", rev])
        result = self._command(args, cwd=working_dir_for(file))
        sink.write(result.output)

    def checkout(
        self,
        file: PathLike | None = None,
        rev: str | bool | None = True,
        directory: PathLike | None = None,
    ) -> None:
        """
        Update file, or the whole checkout in directory when file is None.

        rev=True (the tip sentinel), None or "" updates to the latest revision.
        """
        args = ["update"]
        if rev and rev is not True:
            args.append(str(rev))
        files = [] if file is None else [file]
        args.extend(map(resolve_path, files))
        self._command(args, cwd=_run_dir(files, directory))

    def revert(self, file: PathLike, contents_done: bool = False) -> None:
        """Revert file unless the caller already restored its contents."""
        if contents_done:
            return
        self._command(["revert", resolve_path(file)], cwd=working_dir_for(file))

    def diff(
        self,
        files: Sequence[PathLike],
        sink: TextIO,
        rev1: str | None = None,
        rev2: str | None = None,
        directory: PathLike | None = None,
    ) -> bool:
        """Write a diff of files (every change in directory if none) between rev1 and rev2."""
        args = ["diff", "-i"]
        if rev1:
            args.extend(["--from", rev1])
        if rev2:
            args.extend(["--to", rev2])
        args.extend(map(resolve_path, files))
        result = self._command(args, cwd=_run_dir(files, directory))
        sink.write(result.output)
        return bool(result.output.strip())

    def print_log(
        self,
        files: Sequence[PathLike],
        sink: TextIO,
        limit: int | None = None,
    ) -> None:
        """Write each file's history to sink, one file after another."""
        if limit is None:
            limit = self.settings.log.limit

        for file in files:
            args = ["finfo"]
            if limit:
                args.extend(["-n", str(limit)])
            args.append(resolve_path(file))
            result = self._command(args, cwd=working_dir_for(file))
            if len(files) > 1:
                sink.write(f"{file}:\n")
            sink.write(result.output)

    def annotate(self, file: PathLike, sink: TextIO, rev: str | None = None) -> None:
        """Write line-by-line attribution of file to sink."""
        args = ["annotate"]
        if rev:
            args.extend(["-r", rev])
        args.append(resolve_path(file))
        result = self._command(args, cwd=working_dir_for(file))
        sink.write(result.output)

    def create_tag(self, directory: PathLike, name: str, branch: bool = False) -> None:
        """Tag the current checkout, or start a branch from it."""
        checkout_id = self.get_checkout_id(directory)
        if branch:
            self._command(["branch", "new", name, checkout_id], cwd=directory)
        else:
            self._command(["tag", "add", name, checkout_id], cwd=directory)
        self.logger.info("Created %s %s at %s", "branch" if branch else "tag", name, checkout_id)

    def retrieve_tag(self, directory: PathLike, name: str) -> None:
        """Switch the checkout in directory to name."""
        self._command(["checkout", name], cwd=directory)

    def delete_file(self, file: PathLike) -> None:
        """Stop tracking file."""
        self._command(["rm", resolve_path(file)], cwd=working_dir_for(file))

    def rename_file(self, old: PathLike, new: PathLike) -> None:
        """Rename a tracked file."""
        self._command(["mv", resolve_path(old), resolve_path(new)], cwd=working_dir_for(old))

    def update(self, directory: PathLike, rev: str | None = None) -> None:
        """Update the checkout in directory to rev (the branch tip by default)."""
        self.checkout(None, rev, directory=directory)

    def pull(self, directory: PathLike) -> None:
        """Pull changes from the default remote."""
        self._command(["pull"], cwd=directory)

    def push(self, directory: PathLike) -> None:
        """Push changes to the default remote."""
        self._command(["push"], cwd=directory)
