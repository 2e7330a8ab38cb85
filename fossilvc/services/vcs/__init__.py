"""
VCS services for fossilvc.

Parsers and query services that turn fossil's text output into models.

Services:
- DirectoryStatusScanner: Merge tracked status with untracked files
- RevisionNavigator: Neighbour lookups in a file's branch log
- RepoInfoExtractor: Checkout id, timestamp and tags from `fossil info`
"""

from .history import RevisionNavigator, find_next, find_previous, parse_branch_log
from .info import RepoInfoExtractor, parse_info
from .status import (
    STATUS_CODES,
    DirectoryStatusScanner,
    parse_extras_output,
    parse_update_output,
    translate_status,
)

__all__ = [
    "STATUS_CODES",
    "DirectoryStatusScanner",
    "RepoInfoExtractor",
    "RevisionNavigator",
    "find_next",
    "find_previous",
    "parse_branch_log",
    "parse_extras_output",
    "parse_info",
    "parse_update_output",
    "translate_status",
]
