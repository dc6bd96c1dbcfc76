"""Centralized constants for submission-validator.

Constants are grouped by concern and annotated with ``typing.Final``.

Usage:
    from submission_validator.constants import DEFAULT_TIMEOUT_SECONDS
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "submission-validator"

# Environment overrides
ENV_CONFIG_DIR: Final[str] = "SUBMISSION_VALIDATOR_CONFIG_DIR"
ENV_LOG_LEVEL: Final[str] = "SUBMISSION_VALIDATOR_LOG_LEVEL"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_SERVER: Final[str] = "server"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_FILE_LOGGING: Final[str] = "file_logging"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_HOST: Final[str] = "host"
KEY_PORT: Final[str] = "port"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_SERVER_HOST: Final[str] = "127.0.0.1"
DEFAULT_SERVER_PORT: Final[int] = 8080

# =============================================================================
# Schema Constants
# =============================================================================

SCHEMA_PACKAGE: Final[str] = "submission_validator.schema"
SCHEMA_RESOURCE_NAME: Final[str] = "submission.xsd"

# Element names of the submission document, in schema order
ELEMENT_ROOT: Final[str] = "person"
ELEMENT_NAME: Final[str] = "name"
ELEMENT_STUDENT_ID: Final[str] = "matrikelnummer"
ELEMENT_COMMIT_HASH: Final[str] = "lastcommithash"
ELEMENT_GITHUB_USERNAME: Final[str] = "githubusername"
ELEMENT_REPOSITORY_NAME: Final[str] = "repositoryname"
ELEMENT_REPOSITORY_URL: Final[str] = "repositoryurl"

# =============================================================================
# GitHub Constants
# =============================================================================

GITHUB_HOST: Final[str] = "github.com"
GITHUB_API_ROOT: Final[str] = "https://api.github.com"
# GitHub Enterprise serves its REST API below this path on the same host
GITHUB_ENTERPRISE_API_PATH: Final[str] = "/api/v3"
GITHUB_ACCEPT_HEADER: Final[str] = "application/vnd.github.v3+json"

HTTP_OK: Final[int] = 200

# =============================================================================
# Logging Constants
# =============================================================================

LOGGER_ROOT_NAME: Final[str] = "submission_validator"
LOG_FILE_NAME: Final[str] = "submission-validator.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
