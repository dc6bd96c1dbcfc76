"""Tests for the settings manager."""

from pathlib import Path

import pytest

from submission_validator.config import (
    NetworkSettings,
    ServerSettings,
    Settings,
    SettingsManager,
    default_config_dir,
    load_settings,
)


@pytest.fixture
def write_settings(tmp_path: Path):
    def _write(content: str) -> Path:
        settings_file = tmp_path / "settings.conf"
        settings_file.write_text(content, encoding="utf-8")
        return settings_file

    return _write


class TestSettingsManager:
    """Test SettingsManager.load_settings."""

    def test_defaults_when_file_missing(self, tmp_path):
        settings = SettingsManager(tmp_path).load_settings()

        assert settings == Settings(config_dir=tmp_path)
        assert settings.network == NetworkSettings(timeout_seconds=10)
        assert settings.server == ServerSettings("127.0.0.1", 8080)
        assert not (tmp_path / "settings.conf").exists()

    def test_user_values_override_defaults(self, tmp_path, write_settings):
        write_settings(
            "[DEFAULT]\n"
            "console_log_level = info  # lower-case is accepted\n"
            "file_logging = yes\n"
            "\n"
            "[network]\n"
            "timeout_seconds = 30\n"
            "\n"
            "[server]\n"
            "host = 0.0.0.0\n"
            "port = 9000\n"
        )

        settings = SettingsManager(tmp_path).load_settings()

        assert settings.console_log_level == "INFO"
        assert settings.log_level == "INFO"
        assert settings.file_logging is True
        assert settings.network.timeout_seconds == 30
        assert settings.server == ServerSettings("0.0.0.0", 9000)

    @pytest.mark.parametrize("raw", ["abc", "0", "-5"])
    def test_invalid_timeout_falls_back(
        self, tmp_path, write_settings, caplog, raw
    ):
        write_settings(f"[network]\ntimeout_seconds = {raw}\n")

        settings = SettingsManager(tmp_path).load_settings()

        assert settings.network.timeout_seconds == 10
        assert "timeout_seconds" in caplog.text

    def test_invalid_boolean_disables_file_logging(
        self, tmp_path, write_settings
    ):
        write_settings("[DEFAULT]\nfile_logging = sometimes\n")

        settings = SettingsManager(tmp_path).load_settings()

        assert settings.file_logging is False

    def test_unparsable_file_uses_defaults(self, tmp_path, write_settings):
        write_settings("this is not an ini file\n")

        settings = SettingsManager(tmp_path).load_settings()

        assert settings == Settings(config_dir=tmp_path)


class TestConfigDir:
    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUBMISSION_VALIDATOR_CONFIG_DIR", str(tmp_path))

        assert default_config_dir() == tmp_path
        assert load_settings().config_dir == tmp_path

    def test_default_location(self, monkeypatch):
        monkeypatch.delenv("SUBMISSION_VALIDATOR_CONFIG_DIR", raising=False)

        assert default_config_dir() == (
            Path.home() / ".config" / "submission-validator"
        )
