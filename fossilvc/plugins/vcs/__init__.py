"""
Version control system provider plugins.

Provides implementations for various VCS backends.
"""

from .base import BaseVCSProvider
from .fossil import FossilVCSProvider

__all__ = [
    "BaseVCSProvider",
    "FossilVCSProvider",
]
