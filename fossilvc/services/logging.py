"""
Diagnostic logging for fossilvc on top of the stdlib logging module.

Messages go to a rotating file under ~/.fossilvc and, when enabled, to
stderr. Both sinks share one threshold.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger

DEFAULT_LOG_FILE = Path.home() / ".fossilvc" / "fossilvc.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _to_level(name: str) -> int:
    """Map 'debug'..'error' to a logging constant (WARNING if unknown)."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


class FossilVCLogger(ILogger):
    """
    ILogger backed by a named stdlib logger.

    Usage:
        logger = FossilVCLogger(level="debug", console_enabled=True)
        logger.debug("Running %s", "fossil info")
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    def __init__(
        self,
        name: str = "fossilvc",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
        log_file: Path | None = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for old in list(self._logger.handlers):
            self._logger.removeHandler(old)
            old.close()

        self.log_file = log_file or DEFAULT_LOG_FILE
        self._handlers: list[logging.Handler] = []

        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr))
        if file_enabled:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(
                    self.log_file, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT
                )
            )
        self.set_level(level)

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def log(self, level: str, message: str, *args: Any) -> None:
        self._logger.log(_to_level(level), message, *args)

    def set_level(self, level: str) -> None:
        threshold = _to_level(level)
        for handler in self._handlers:
            handler.setLevel(threshold)


class NullLogger(ILogger):
    """Discards everything; the default outside bootstrap."""

    def log(self, level: str, message: str, *args: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
