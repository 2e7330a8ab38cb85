"""
Logger interface for internal diagnostic output.

Diagnostics record which fossil commands ran, where, and how they exited.
Anything meant for the user goes through click instead.
"""

from abc import ABC, abstractmethod
from typing import Any

LEVELS = ("debug", "info", "warning", "error")


class ILogger(ABC):
    """
    Diagnostic logger.

    Implementations provide log() and set_level(); the per-level helpers
    forward to log() with %-style arguments left unformatted.
    """

    @abstractmethod
    def log(self, level: str, message: str, *args: Any) -> None:
        """Record message at level (one of LEVELS)."""

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Drop messages below level from now on."""

    def debug(self, message: str, *args: Any) -> None:
        self.log("debug", message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.log("info", message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self.log("warning", message, *args)

    def error(self, message: str, *args: Any) -> None:
        self.log("error", message, *args)
