"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class Settings:
    """Settings from environment.

    Handles parsing, validation, and defaults for all CMD_RUNNER_* vars.
    """

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    # Async runner: kill the child when its awaiting task is cancelled
    kill_on_cancel: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=cls._get_log_level("CMD_RUNNER_LOG_LEVEL", "INFO"),
            log_colors=cls._get_bool("CMD_RUNNER_LOG_COLORS", True),
            kill_on_cancel=cls._get_bool("CMD_RUNNER_KILL_ON_CANCEL", True),
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or unrecognized

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        value = value.strip().lower()
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        logger.warning("Invalid bool for %s: %s, using default %s", key, value, default)
        return default

    @staticmethod
    def _get_log_level(key: str, default: str) -> str:
        """Get a logging level name from environment."""
        value = os.getenv(key)
        if value is None:
            return default
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            logger.warning("Invalid log level for %s: %s, using default %s", key, value, default)
            return default
        return level
