"""
Repository info extraction from ``fossil info``.

Pulls the checkout hash and timestamp, the tags and (when present) the
repository path and check-in comment out of the info block.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

from ...core.exceptions import FossilParseError
from ...core.interfaces.invoker import IProcessInvoker
from ...core.models.vcs import SHORT_ID_LENGTH, RepoInfo

CHECKOUT_RE = re.compile(
    r"^checkout:\s+([0-9a-fA-F]+)\s+(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) UTC",
    re.MULTILINE,
)
TAGS_RE = re.compile(r"^tags:[ \t]+(.*?)\s*$", re.MULTILINE)
REPOSITORY_RE = re.compile(r"^repository:[ \t]+(.*?)\s*$", re.MULTILINE)
COMMENT_RE = re.compile(r"^comment:[ \t]+(.*?)\s*$", re.MULTILINE)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: str) -> datetime:
    """Parse fossil's ``YYYY-MM-DD HH:MM:SS`` (UTC) into an aware datetime."""
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def parse_info(text: str) -> RepoInfo:
    """
    Parse ``fossil info`` output.

    Raises:
        FossilParseError: If the checkout or tags line is missing
    """
    checkout = CHECKOUT_RE.search(text)
    if checkout is None:
        raise FossilParseError("No checkout line in fossil info output", field="checkout")

    tags = TAGS_RE.search(text)
    if tags is None:
        raise FossilParseError("No tags line in fossil info output", field="tags")

    repository = REPOSITORY_RE.search(text)
    comment = COMMENT_RE.search(text)
    checkout_hash = checkout.group(1)

    return RepoInfo(
        checkout_id=checkout_hash[:SHORT_ID_LENGTH],
        checkout_hash=checkout_hash,
        checkout_time=parse_timestamp(checkout.group(2)),
        tags=tags.group(1),
        repository=repository.group(1) if repository else None,
        comment=comment.group(1) if comment else None,
    )


class RepoInfoExtractor:
    """
    Queries checkout information for a directory.

    Nothing is cached: the checkout can move between calls.
    """

    def __init__(self, invoker: IProcessInvoker) -> None:
        self.invoker = invoker

    def get_info(self, directory: str | Path) -> RepoInfo:
        """Run ``fossil info`` in directory and parse it."""
        return parse_info(self.invoker.run_or_empty(["info"], cwd=directory))

    def get_checkout_id(self, directory: str | Path) -> str:
        """Short (9 character) id of the current checkout."""
        return self.get_info(directory).checkout_id

    def extra_headers(self, directory: str | Path) -> list[tuple[str, str]]:
        """(label, value) pairs describing the checkout, for a status header."""
        info = self.get_info(directory)
        headers: list[tuple[str, str]] = []
        if info.repository:
            headers.append(("Repository", info.repository))
        headers.append(
            ("Checkout", f"{info.checkout_id} {info.checkout_time.strftime(TIMESTAMP_FORMAT)} UTC")
        )
        headers.append(("Tags", info.tags))
        if info.comment:
            headers.append(("Comment", info.comment))
        return headers
