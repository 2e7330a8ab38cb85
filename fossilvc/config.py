"""
Reading and writing the user-editable config file.

Keys are ``section.field`` pairs; CONFIGURABLE_KEYS lists the ones
``fossilvc config set`` accepts. Values are parsed from their command-line
strings, validated, and written back to .fossilvc/config.toml, keeping only
those that differ from the model defaults.
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .core.exceptions import ConfigValidationError
from .core.interfaces.logger import LEVELS
from .core.settings import CONFIG_DIR_NAME, CONFIG_FILE_NAME, find_config_file, load_settings

# Config keys that can be set via `fossilvc config`
CONFIGURABLE_KEYS = {
    "fossil.executable": {
        "type": str,
        "default": "fossil",
        "description": "Name or path of the fossil executable",
    },
    "fossil.timeout": {
        "type": float,
        "default": 60.0,
        "description": "Seconds to wait for a fossil command before giving up",
    },
    "checkin.extra_flags": {
        "type": list,
        "default": [],
        "description": "Extra flags passed to every `fossil commit` (comma-separated)",
    },
    "log.limit": {
        "type": int,
        "default": None,
        "description": "Default number of history entries shown per file",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": True,
        "description": "Output debug logs to ~/.fossilvc/fossilvc.log",
    },
}

SECTIONS = ("fossil", "checkin", "log", "logging")

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


def _get_default_config() -> dict:
    """Defaults of every section, taken from FossilVCConfig."""
    from .core.models.config import FossilVCConfig

    return FossilVCConfig().to_dict()


def _split_key(key: str) -> tuple[str, str]:
    section, _, field = key.partition(".")
    return section, field


def _toml_value(val: Any) -> str:
    """Render a scalar or list as a TOML value."""
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, str):
        escaped = val.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(val, list):
        return "[" + ", ".join(_toml_value(v) for v in val) + "]"
    return str(val)


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """Effective configuration as nested dicts (file and environment over defaults)."""
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def get_config_path_for_write(start_dir: str | None = None) -> Path:
    """
    The config.toml that ``config set`` writes to.

    An existing .fossilvc/config.toml above start_dir wins; a pyproject.toml
    is never rewritten, so a new .fossilvc/config.toml is made in start_dir
    (default: cwd) instead.
    """
    existing = find_config_file(start_dir)
    if existing is not None and existing.name == CONFIG_FILE_NAME:
        return existing

    config_dir = (Path(start_dir) if start_dir else Path.cwd()) / CONFIG_DIR_NAME
    config_dir.mkdir(exist_ok=True)
    return config_dir / CONFIG_FILE_NAME


def save_config(config: dict, config_path: Path) -> None:
    """Write the non-default values of config to config_path as TOML."""
    defaults = _get_default_config()
    lines: list[str] = []

    for section in SECTIONS:
        changed = {
            key: val
            for key, val in config.get(section, {}).items()
            if val is not None and val != defaults.get(section, {}).get(key)
        }
        if not changed:
            continue
        lines.append(f"[{section}]")
        lines.extend(f"{key} = {_toml_value(val)}" for key, val in changed.items())
        lines.append("")

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text("\n".join(lines))


def config_get(key: str, start_dir: str | None = None):
    """Current value of key, or None for an unknown key."""
    section, field = _split_key(key)
    return load_config(start_dir=start_dir).get(section, {}).get(field)


def _parse_value(key: str, value: str) -> Any:
    """Convert a command-line string to the type CONFIGURABLE_KEYS declares for key."""
    key_type = CONFIGURABLE_KEYS[key]["type"]

    if key_type is bool:
        lowered = value.lower()
        if lowered not in _TRUE + _FALSE:
            raise ConfigValidationError(f"Invalid boolean value: {value}", key=key, value=value)
        return lowered in _TRUE

    if key_type is list:
        return [v.strip() for v in value.split(",") if v.strip()]

    if key_type in (int, float):
        try:
            number = key_type(value)
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid {key_type.__name__} value: {value}", key=key, value=value, cause=e
            ) from e
        if number <= 0:
            raise ConfigValidationError(f"Value must be positive: {value}", key=key, value=value)
        return number

    if key == "logging.level" and value not in LEVELS:
        raise ConfigValidationError(
            f"Invalid log level: {value}. Valid levels: {', '.join(LEVELS)}",
            key=key,
            value=value,
        )
    return value


def _validate(key: str, config: dict) -> None:
    """Check config against the section models before it is written."""
    from .core.models.config import FossilVCConfig

    try:
        FossilVCConfig.model_validate(config)
    except ValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors())
        raise ConfigValidationError(f"Invalid value for {key}: {reason}", key=key, cause=e) from e


def config_set(key: str, value: str, start_dir: str | None = None):
    """
    Validate value for key and save it.

    Returns:
        (path written, parsed value)

    Raises:
        ConfigValidationError: For an unknown key or a value of the wrong type
    """
    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIGURABLE_KEYS)}",
            key=key,
        )

    typed_value = _parse_value(key, value)

    config = load_config(start_dir=start_dir)
    section, field = _split_key(key)
    config.setdefault(section, {})[field] = typed_value
    _validate(key, config)

    config_path = get_config_path_for_write(start_dir)
    save_config(config, config_path)
    return config_path, typed_value


def config_list():
    """All configurable keys with their type, default and description."""
    return CONFIGURABLE_KEYS
