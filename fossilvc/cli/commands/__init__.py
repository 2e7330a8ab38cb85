"""
Click command implementations for fossilvc CLI.

Each module groups related fossil operations (status.py holds the
state queries, checkin.py the commands that change what is tracked).

Commands are registered with the main CLI group via the
register_commands() function in fossilvc.cli.
"""

from .checkin import add, commit, mv, revert, rm
from .checkout import cat, switch, tag, update
from .config import config
from .diff import annotate, diff
from .info import info
from .log import log, neighbors
from .repo import init, pull, push
from .status import revision, state, status

COMMANDS = [
    add,
    annotate,
    cat,
    commit,
    config,
    diff,
    info,
    init,
    log,
    mv,
    neighbors,
    pull,
    push,
    revert,
    revision,
    rm,
    state,
    status,
    switch,
    tag,
    update,
]

__all__ = [
    "COMMANDS",
    "add",
    "annotate",
    "cat",
    "commit",
    "config",
    "diff",
    "info",
    "init",
    "log",
    "mv",
    "neighbors",
    "pull",
    "push",
    "revert",
    "revision",
    "rm",
    "state",
    "status",
    "switch",
    "tag",
    "update",
]
