"""
fossilvc - a Fossil SCM integration layer.

Runs the fossil executable and parses what it prints into file states,
revision neighbours and checkout information.

Usage:
    from fossilvc import FossilVCSProvider

    fossil = FossilVCSProvider()
    fossil.dir_status("/path/to/checkout")
"""

from .core.models.vcs import FileState, FileStatus, RepoInfo
from .plugins.vcs.fossil import FossilVCSProvider

__all__ = [
    "FileState",
    "FileStatus",
    "FossilVCSProvider",
    "RepoInfo",
]
