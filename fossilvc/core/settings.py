"""
Settings for fossilvc, loaded with pydantic-settings.

Sources, strongest first: keyword arguments, FOSSILVC_<SECTION>__<FIELD>
environment variables, the nearest config file, model defaults. The config
file is .fossilvc/config.toml or the [tool.fossilvc] table of a
pyproject.toml, whichever comes first walking up from the start directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .models.config import CheckinConfig, FossilConfig, LogConfig, LoggingConfig

CONFIG_DIR_NAME = ".fossilvc"
CONFIG_FILE_NAME = "config.toml"
PYPROJECT_NAME = "pyproject.toml"


def _get_logger():
    from ..services.logging import NullLogger
    from .container import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if path.name == PYPROJECT_NAME:
        return data.get("tool", {}).get("fossilvc", {})
    return data


def _has_fossilvc_table(pyproject: Path) -> bool:
    try:
        with open(pyproject, "rb") as f:
            return "fossilvc" in tomllib.load(f).get("tool", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        _get_logger().debug("Skipping unreadable %s: %s", pyproject, e)
        return False


def find_config_file(start_dir: str | None = None) -> Path | None:
    """Nearest config file at or above start_dir (default: cwd), or None."""
    start = Path(start_dir) if start_dir else Path.cwd()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_NAME
        if pyproject.is_file() and _has_fossilvc_table(pyproject):
            return pyproject
    return None


@dataclass
class ConfigFile:
    """Contents of a config file; path is None when there was none."""

    path: Path | None = None
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    @classmethod
    def read(cls, path: Path | None) -> ConfigFile:
        """
        Read path. A broken file gives empty data plus an error message,
        so settings fall back to defaults instead of failing.
        """
        if path is None:
            return cls()
        try:
            return cls(path=path, data=_read_toml(path))
        except (OSError, tomllib.TOMLDecodeError) as e:
            _get_logger().warning("Cannot use config file %s: %s", path, e)
            return cls(path=path, error=f"Cannot use config file {path}: {e}")


class ConfigFileSource(PydanticBaseSettingsSource):
    """Settings source serving the sections of one ConfigFile."""

    def __init__(self, settings_cls: type[BaseSettings], config_file: ConfigFile):
        super().__init__(settings_cls)
        self.config_file = config_file

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.config_file.data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self.config_file.data)


# load_settings() hands its ConfigFile to settings_customise_sources() here
_pending: ConfigFile | None = None


class FossilVCSettings(BaseSettings):
    """
    All fossilvc settings.

    FOSSIL_EXECUTABLE is also honoured for fossil.executable when nothing
    else sets it.
    """

    model_config = SettingsConfigDict(
        env_prefix="FOSSILVC_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    fossil: FossilConfig = FossilConfig()
    checkin: CheckinConfig = CheckinConfig()
    log: LogConfig = LogConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_source: ConfigFile = PrivateAttr(default_factory=ConfigFile)

    @model_validator(mode="before")
    @classmethod
    def fossil_executable_alias(cls, data: Any) -> Any:
        executable = os.environ.get("FOSSIL_EXECUTABLE")
        if not executable or not isinstance(data, dict):
            return data
        section = data.get("fossil", {})
        if isinstance(section, dict) and not section.get("executable"):
            data = {**data, "fossil": {**section, "executable": executable}}
        return data

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        config_file = _pending or ConfigFile.read(find_config_file())
        return init_settings, env_settings, ConfigFileSource(settings_cls, config_file)

    @property
    def config_file(self) -> str | None:
        """Config file the values came from (None if none was usable)."""
        source = self._config_source
        if source.path is None or source.error:
            return None
        return str(source.path)

    @property
    def config_error(self) -> str | None:
        """Why the config file was ignored, if it was."""
        return self._config_source.error

    def to_dict(self) -> dict[str, Any]:
        """Sections as plain nested dicts."""
        return self.model_dump()


def _build(config_file: ConfigFile) -> FossilVCSettings:
    global _pending

    _pending = config_file
    try:
        return FossilVCSettings()
    finally:
        _pending = None


def load_settings(
    config_path: Path | None = None, start_dir: str | None = None
) -> FossilVCSettings:
    """
    Load settings from config_path, or from the config file found from
    start_dir (default: cwd), overlaid with the environment.

    A config file holding values the models reject is ignored as a whole,
    like an unparsable one; config_error then says why.

    Raises:
        ValidationError: If the environment alone holds invalid values
    """
    config_file = ConfigFile.read(config_path or find_config_file(start_dir))
    try:
        settings = _build(config_file)
    except ValidationError as e:
        if not config_file.data:
            raise
        reason = "; ".join(
            f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()
        )
        _get_logger().warning("Ignoring config file %s: %s", config_file.path, reason)
        config_file = ConfigFile(
            path=config_file.path,
            error=f"Ignoring config file {config_file.path}: {reason}",
        )
        settings = _build(config_file)
    settings._config_source = config_file
    return settings
