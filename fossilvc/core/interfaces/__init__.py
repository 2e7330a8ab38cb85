"""
Interface definitions for fossilvc.

Abstract base classes that decouple the command facade from the process
runner and from diagnostic logging.
"""

from .invoker import IProcessInvoker
from .logger import ILogger
from .vcs import IVCSProvider

__all__ = [
    "ILogger",
    "IProcessInvoker",
    "IVCSProvider",
]
