"""
Config section models.

Each class is one table of .fossilvc/config.toml; FossilVCConfig is the
whole file.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, field_validator

from .base import SectionModel

LogLevel = Literal["debug", "info", "warning", "error"]


class FossilConfig(SectionModel):
    """[fossil]: which executable to run and how long to wait for it."""

    executable: Annotated[str, Field(min_length=1)] = "fossil"
    timeout: Annotated[float, Field(gt=0)] = 60.0


class CheckinConfig(SectionModel):
    """[checkin]: flags appended to every ``fossil commit``."""

    extra_flags: list[str] = Field(default_factory=list)

    @field_validator("extra_flags", mode="before")
    @classmethod
    def split_flags(cls, value: Any) -> Any:
        # "--a, --b" is accepted as well as ["--a", "--b"]
        if isinstance(value, str):
            return [flag.strip() for flag in value.split(",") if flag.strip()]
        return value or []


class LogConfig(SectionModel):
    """[log]: default number of history entries per file (None: all)."""

    limit: Annotated[int, Field(gt=0)] | None = None


class LoggingConfig(SectionModel):
    """[logging]: diagnostic log threshold and sinks."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True


class FossilVCConfig(SectionModel):
    """Every section, with defaults."""

    fossil: FossilConfig = Field(default_factory=FossilConfig)
    checkin: CheckinConfig = Field(default_factory=CheckinConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
