"""Configuration module for cmd_runner.

- Settings: Environment variable configuration
"""

from cmd_runner.config.settings import Settings

__all__ = ["Settings"]
