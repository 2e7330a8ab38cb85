"""
fossilvc plugin architecture.

This package contains provider implementations:
- vcs: Version control providers (Fossil)

New providers are picked up by registering them with the service
container, either from this package or through the "fossilvc.plugins"
entry point group.
"""

from . import vcs

__all__ = ["vcs"]
