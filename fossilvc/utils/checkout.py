"""
Checkout path utilities.

Locating a Fossil checkout root and converting the root-relative paths
fossil prints into paths relative to an arbitrary directory.
"""

import os
from pathlib import Path

# Marker files fossil writes at the top of a checkout (_FOSSIL_ on older/Windows checkouts)
CHECKOUT_MARKERS = (".fslckout", "_FOSSIL_")


def find_checkout_root(start: str | Path | None = None) -> Path | None:
    """
    Find the checkout root by walking up from start (or cwd).

    Args:
        start: File or directory to start from

    Returns:
        Directory holding a checkout marker, or None if not in a checkout
    """
    path = Path(start).absolute() if start else Path.cwd()
    if path.is_file():
        path = path.parent

    for parent in [path, *path.parents]:
        for marker in CHECKOUT_MARKERS:
            if (parent / marker).is_file():
                return parent
    return None


def reroot(path: str, root: str | Path, directory: str | Path) -> str:
    """
    Re-express a checkout-root-relative path relative to directory.

    Examples:
        reroot("sub/a.txt", "/r", "/r/sub")   -> "a.txt"
        reroot("b.txt", "/r", "/r/sub")       -> "../b.txt"

    Args:
        path: Path as reported by fossil (relative to the checkout root)
        root: Checkout root
        directory: Directory the result should be relative to

    Returns:
        POSIX-style relative path
    """
    absolute = os.path.normpath(os.path.join(os.fspath(root), path))
    relative = os.path.relpath(absolute, os.path.normpath(os.fspath(directory)))
    return Path(relative).as_posix()


def resolve_path(path: str | Path) -> str:
    """Return the absolute, symlink-free form of path."""
    return str(Path(path).resolve())


def working_dir_for(path: str | Path) -> str:
    """Directory a fossil command about path should run in."""
    p = Path(path).absolute()
    return str(p if p.is_dir() else p.parent)
