"""
Tests for fossilvc configuration loading and the config command.

Tests verify:
- Defaults come from the Pydantic models
- .fossilvc/config.toml and pyproject.toml [tool.fossilvc] are found
- Environment variables override the config file
- Config round-trip (save -> load) preserves values
- config set validates keys and values
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from fossilvc.cli.commands.config import config
from fossilvc.config import (
    CONFIGURABLE_KEYS,
    _get_default_config,
    config_get,
    config_set,
    load_config,
    save_config,
)
from fossilvc.core.exceptions import ConfigValidationError
from fossilvc.core.models.config import FossilVCConfig
from fossilvc.core.settings import find_config_file, load_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep the caller's environment out of settings loading."""
    for name in (
        "FOSSIL_EXECUTABLE",
        "FOSSILVC_FOSSIL__EXECUTABLE",
        "FOSSILVC_FOSSIL__TIMEOUT",
        "FOSSILVC_LOG__LIMIT",
        "FOSSILVC_LOGGING__LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def _write_config(root: Path, text: str) -> Path:
    config_path = root / ".fossilvc" / "config.toml"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(text)
    return config_path


class TestConfigLoading:
    """Tests for load_config() and load_settings()."""

    def test_load_config_without_file_returns_defaults(self, tmp_path: Path) -> None:
        """No config file means model defaults."""
        config = load_config(start_dir=str(tmp_path))

        assert config["fossil"]["executable"] == "fossil"
        assert config["fossil"]["timeout"] == 60.0
        assert config["checkin"]["extra_flags"] == []
        assert config["log"]["limit"] is None
        assert config["logging"]["level"] == "warning"

    def test_load_config_merges_with_defaults(self, tmp_path: Path) -> None:
        """Values from the file override only what they name."""
        _write_config(tmp_path, "[fossil]\ntimeout = 5\n")

        config = load_config(start_dir=str(tmp_path))

        assert config["fossil"]["timeout"] == 5.0
        assert config["fossil"]["executable"] == "fossil"

    def test_config_found_from_subdirectory(self, tmp_path: Path) -> None:
        """The config file is found by walking up."""
        config_path = _write_config(tmp_path, "[log]\nlimit = 10\n")
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)

        assert find_config_file(str(sub)) == config_path
        assert load_settings(start_dir=str(sub)).log.limit == 10

    def test_pyproject_section(self, tmp_path: Path) -> None:
        """[tool.fossilvc] in pyproject.toml is honoured."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.fossilvc.fossil]\nexecutable = "/opt/fossil/bin/fossil"\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.fossil.executable == "/opt/fossil/bin/fossil"
        assert settings.config_file == str(tmp_path / "pyproject.toml")

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch) -> None:
        """FOSSILVC_<section>__<field> beats the config file."""
        _write_config(tmp_path, "[fossil]\ntimeout = 5\n")
        monkeypatch.setenv("FOSSILVC_FOSSIL__TIMEOUT", "7.5")

        assert load_settings(start_dir=str(tmp_path)).fossil.timeout == 7.5

    def test_fossil_executable_env_alias(self, tmp_path: Path, monkeypatch) -> None:
        """FOSSIL_EXECUTABLE selects the executable."""
        monkeypatch.setenv("FOSSIL_EXECUTABLE", "/usr/local/bin/fossil")

        assert load_settings(start_dir=str(tmp_path)).fossil.executable == "/usr/local/bin/fossil"

    def test_broken_toml_is_reported(self, tmp_path: Path) -> None:
        """A config file that does not parse yields defaults and an error."""
        _write_config(tmp_path, "[fossil\n")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.fossil.timeout == 60.0
        assert settings.config_error is not None

    @pytest.mark.parametrize(
        "content",
        ["[fossil]\ntimeout = -1\n", '[fossil]\nexecutable = ""\n', '[logging]\nlevel = "loud"\n'],
    )
    def test_invalid_values_are_reported(self, tmp_path: Path, content: str) -> None:
        """A file with values the models reject yields defaults and an error."""
        _write_config(tmp_path, content)

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.fossil.timeout == 60.0
        assert settings.fossil.executable == "fossil"
        assert settings.logging.level == "warning"
        assert settings.config_file is None
        assert "Ignoring config file" in settings.config_error

    def test_invalid_file_does_not_hide_environment(self, tmp_path: Path, monkeypatch) -> None:
        """The environment still applies when the file is ignored."""
        _write_config(tmp_path, '[logging]\nlevel = "loud"\n')
        monkeypatch.setenv("FOSSILVC_FOSSIL__TIMEOUT", "5")

        assert load_settings(start_dir=str(tmp_path)).fossil.timeout == 5.0

    def test_comma_separated_extra_flags(self, tmp_path: Path) -> None:
        """extra_flags may be written as a comma-separated string."""
        _write_config(tmp_path, '[checkin]\nextra_flags = "--no-warnings, --allow-empty"\n')

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.checkin.extra_flags == ["--no-warnings", "--allow-empty"]


class TestConfigSaveLoad:
    """Tests for save_config() round-trips."""

    def test_save_and_reload_preserves_values(self, tmp_path: Path) -> None:
        """Saved values load back unchanged."""
        config = load_config(start_dir=str(tmp_path))
        config["fossil"]["executable"] = 'C:\\fossil "x"'
        config["checkin"]["extra_flags"] = ["--no-warnings"]
        config["logging"]["console"] = True

        config_path = tmp_path / ".fossilvc" / "config.toml"
        save_config(config, config_path)
        reloaded = load_config(start_dir=str(tmp_path))

        assert reloaded["fossil"]["executable"] == 'C:\\fossil "x"'
        assert reloaded["checkin"]["extra_flags"] == ["--no-warnings"]
        assert reloaded["logging"]["console"] is True

    def test_save_only_writes_non_defaults(self, tmp_path: Path) -> None:
        """Default values are left out of the file."""
        config = load_config(start_dir=str(tmp_path))
        config["log"]["limit"] = 20

        config_path = tmp_path / ".fossilvc" / "config.toml"
        save_config(config, config_path)

        assert config_path.read_text().strip() == "[log]\nlimit = 20"


class TestConfigurableKeys:
    """Tests for CONFIGURABLE_KEYS, config_get() and config_set()."""

    def test_defaults_match_pydantic_models(self) -> None:
        """Every documented default is the model default."""
        model = FossilVCConfig()
        for key, info in CONFIGURABLE_KEYS.items():
            section, field = key.split(".")
            assert getattr(getattr(model, section), field) == info["default"], key

    def test_all_configurable_keys_are_readable(self, tmp_path: Path) -> None:
        """config_get answers every configurable key."""
        defaults = _get_default_config()
        for key in CONFIGURABLE_KEYS:
            section, field = key.split(".")
            assert config_get(key, start_dir=str(tmp_path)) == defaults[section][field]

    def test_set_then_get(self, tmp_path: Path) -> None:
        """config_set stores a typed value in .fossilvc/config.toml."""
        path, value = config_set("fossil.timeout", "12", start_dir=str(tmp_path))

        assert value == 12.0
        assert path == tmp_path / ".fossilvc" / "config.toml"
        assert config_get("fossil.timeout", start_dir=str(tmp_path)) == 12.0

    def test_set_list(self, tmp_path: Path) -> None:
        """List keys take comma-separated values."""
        _, value = config_set("checkin.extra_flags", "--a, --b", start_dir=str(tmp_path))

        assert value == ["--a", "--b"]

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("no.such", "x"),
            ("logging.console", "maybe"),
            ("fossil.timeout", "soon"),
            ("fossil.timeout", "0"),
            ("log.limit", "-3"),
            ("logging.level", "verbose"),
            ("fossil.executable", ""),
        ],
    )
    def test_set_rejects_invalid(self, tmp_path: Path, key: str, value: str) -> None:
        """Unknown keys and malformed values are rejected."""
        with pytest.raises(ConfigValidationError):
            config_set(key, value, start_dir=str(tmp_path))

        assert not (tmp_path / ".fossilvc" / "config.toml").exists()


class TestConfigCommand:
    """Tests for 'fossilvc config'."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def obj(self, tmp_path: Path):
        class Ctx:
            cwd = tmp_path

        return Ctx()

    def test_list(self, runner) -> None:
        """list shows every key."""
        result = runner.invoke(config, ["list"])

        assert result.exit_code == 0
        for key in CONFIGURABLE_KEYS:
            assert key in result.output

    def test_set_and_get(self, runner, obj, tmp_path: Path) -> None:
        """set writes below the context directory and get reads it back."""
        result = runner.invoke(config, ["set", "checkin.extra_flags", "--no-warnings"], obj=obj)
        assert result.exit_code == 0, result.output
        assert (tmp_path / ".fossilvc" / "config.toml").exists()

        result = runner.invoke(config, ["get", "checkin.extra_flags"], obj=obj)
        assert "--no-warnings" in result.output

    def test_get_unset(self, runner, obj) -> None:
        """Keys without a value say so."""
        result = runner.invoke(config, ["get", "log.limit"], obj=obj)

        assert "(not set)" in result.output

    def test_set_invalid(self, runner, obj) -> None:
        """Validation failures become CLI errors."""
        result = runner.invoke(config, ["set", "fossil.timeout", "soon"], obj=obj)

        assert result.exit_code == 1
        assert "Invalid float value" in result.output
