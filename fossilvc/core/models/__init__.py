"""
Pydantic models: parsed fossil output (vcs) and config sections (config).
"""

from .base import FossilVCBaseModel, ImmutableModel, SectionModel
from .config import (
    CheckinConfig,
    FossilConfig,
    FossilVCConfig,
    LogConfig,
    LoggingConfig,
)
from .vcs import (
    SHORT_ID_LENGTH,
    CommandResult,
    FileState,
    FileStatus,
    RepoInfo,
    RevisionLogEntry,
)

__all__ = [
    "SHORT_ID_LENGTH",
    "CheckinConfig",
    "CommandResult",
    "FileState",
    "FileStatus",
    "FossilConfig",
    "FossilVCBaseModel",
    "FossilVCConfig",
    "ImmutableModel",
    "LogConfig",
    "LoggingConfig",
    "RepoInfo",
    "RevisionLogEntry",
    "SectionModel",
]
