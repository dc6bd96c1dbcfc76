"""Settings manager for the INI configuration file."""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path

from submission_validator.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_CONFIG_DIR,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_FILE_LOGGING,
    KEY_HOST,
    KEY_LOG_LEVEL,
    KEY_PORT,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_NETWORK,
    SECTION_SERVER,
)
from submission_validator.logger import get_logger

logger = get_logger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]


@dataclass(slots=True, frozen=True)
class NetworkSettings:
    """Network settings for the remote checks."""

    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS


@dataclass(slots=True, frozen=True)
class ServerSettings:
    """Bind address of the leaderboard service."""

    host: str = DEFAULT_SERVER_HOST
    port: int = DEFAULT_SERVER_PORT


@dataclass(slots=True, frozen=True)
class Settings:
    """Typed view of settings.conf."""

    config_dir: Path
    config_version: str = CONFIG_VERSION
    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    file_logging: bool = False
    network: NetworkSettings = field(default_factory=NetworkSettings)
    server: ServerSettings = field(default_factory=ServerSettings)


def default_config_dir() -> Path:
    """Return the configuration directory.

    ``SUBMISSION_VALIDATOR_CONFIG_DIR`` takes precedence over
    ``~/.config/submission-validator``.
    """
    env_dir = os.getenv(ENV_CONFIG_DIR)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR


class SettingsManager:
    """Loads settings.conf merged over built-in defaults."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path
                (defaults to ``default_config_dir()``)

        """
        self.config_dir = config_dir or default_config_dir()
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    @staticmethod
    def get_default_settings() -> RawConfigDict:
        """Get default configuration values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_FILE_LOGGING: "false",
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_SERVER: {
                KEY_HOST: DEFAULT_SERVER_HOST,
                KEY_PORT: str(DEFAULT_SERVER_PORT),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults.

        Args:
            defaults: Default configuration values

        Returns:
            ConfigParser populated with defaults

        """
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: value
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, subvalue)

        return config

    def load_settings(self) -> Settings:
        """Load settings from the INI file.

        A missing file yields the defaults; the file is never written.

        Returns:
            Loaded settings

        """
        config = self._create_config_from_defaults(
            self.get_default_settings()
        )

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Ignoring unreadable settings file %s: %s",
                    self.settings_file,
                    e,
                )
                config = self._create_config_from_defaults(
                    self.get_default_settings()
                )
        else:
            logger.debug(
                "No settings file at %s, using defaults", self.settings_file
            )

        return self._convert_to_settings(config)

    def _convert_to_settings(self, config: configparser.ConfigParser) -> Settings:
        """Convert a ConfigParser into typed Settings.

        Args:
            config: Parsed configuration

        Returns:
            Typed settings

        """
        defaults = config[SECTION_DEFAULT]

        file_logging = False
        try:
            file_logging = defaults.getboolean(KEY_FILE_LOGGING, False)
        except ValueError:
            logger.warning(
                "Invalid %s value %r, file logging disabled",
                KEY_FILE_LOGGING,
                defaults.get(KEY_FILE_LOGGING),
            )

        return Settings(
            config_dir=self.config_dir,
            config_version=defaults.get(KEY_CONFIG_VERSION, CONFIG_VERSION),
            log_level=defaults.get(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
            console_log_level=defaults.get(
                KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ).upper(),
            file_logging=file_logging,
            network=NetworkSettings(
                timeout_seconds=self._get_int(
                    config,
                    SECTION_NETWORK,
                    KEY_TIMEOUT_SECONDS,
                    DEFAULT_TIMEOUT_SECONDS,
                ),
            ),
            server=ServerSettings(
                host=config.get(
                    SECTION_SERVER, KEY_HOST, fallback=DEFAULT_SERVER_HOST
                ),
                port=self._get_int(
                    config, SECTION_SERVER, KEY_PORT, DEFAULT_SERVER_PORT
                ),
            ),
        )

    @staticmethod
    def _get_int(
        config: configparser.ConfigParser,
        section: str,
        key: str,
        default: int,
    ) -> int:
        """Read a positive integer, falling back to ``default``."""
        raw_value = config.get(section, key, fallback=str(default))
        try:
            value = int(raw_value)
        except ValueError:
            value = 0
        if value <= 0:
            logger.warning(
                "Invalid [%s] %s value %r, using %s",
                section,
                key,
                raw_value,
                default,
            )
            return default
        return value


def load_settings(config_dir: Path | None = None) -> Settings:
    """Load settings from ``config_dir`` or the default location."""
    return SettingsManager(config_dir).load_settings()
