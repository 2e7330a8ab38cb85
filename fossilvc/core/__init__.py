"""
Core of fossilvc: service container, plugin discovery, bootstrap,
interfaces, models and exceptions.
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    ConfigValidationError,
    FossilCheckoutNotFoundError,
    FossilCommandError,
    FossilCommitError,
    FossilNotFoundError,
    FossilParseError,
    FossilTimeoutError,
    FossilToolError,
    FossilUsageError,
    FossilVCException,
    InvalidArgumentError,
)

__all__ = [
    "ConfigValidationError",
    "FossilCheckoutNotFoundError",
    "FossilCommandError",
    "FossilCommitError",
    "FossilNotFoundError",
    "FossilParseError",
    "FossilTimeoutError",
    "FossilToolError",
    "FossilUsageError",
    "FossilVCException",
    "InvalidArgumentError",
    "ServiceContainer",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "resolve",
    "try_resolve",
]
