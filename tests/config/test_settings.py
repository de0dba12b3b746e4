"""Tests for RelwatchSettings and section models."""

import pytest
from pydantic import ValidationError

from relwatch.config.models import HardDefaultsConfig
from relwatch.config.settings import RelwatchSettings


class TestRelwatchSettingsDefaults:
    def test_all_defaults(self) -> None:
        settings = RelwatchSettings.from_cli()
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.hard_defaults.interval == "10m"
        assert settings.hard_defaults.semantic_versioning is True

    def test_frozen(self) -> None:
        settings = RelwatchSettings.from_cli()
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestEnvOverrides:
    def test_nested_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELWATCH_HARD_DEFAULTS__INTERVAL", "5m")
        monkeypatch.setenv("RELWATCH_HARD_DEFAULTS__SEMANTIC_VERSIONING", "false")
        settings = RelwatchSettings.from_cli()
        assert settings.hard_defaults.interval == "5m"
        assert settings.hard_defaults.semantic_versioning is False

    def test_cli_flags_override(self) -> None:
        settings = RelwatchSettings.from_cli(json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestHardDefaultsConfig:
    def test_decimal_interval_normalized(self) -> None:
        assert HardDefaultsConfig(interval="90").interval == "90s"

    def test_invalid_interval_rejected(self) -> None:
        with pytest.raises(ValueError, match="AhBmCs"):
            HardDefaultsConfig(interval="10x")

    def test_out_of_range_interval_rejected(self) -> None:
        with pytest.raises(ValueError, match="AhBmCs"):
            HardDefaultsConfig(interval="3000000h")

    def test_build_hard_defaults_is_fresh_layer(self) -> None:
        settings = RelwatchSettings.from_cli()
        first = settings.build_hard_defaults()
        second = settings.build_hard_defaults()
        assert first is not second
        assert first.interval == "10m"
        assert first.semantic_versioning is True
        first.interval = "1h"
        assert settings.hard_defaults.interval == "10m"
