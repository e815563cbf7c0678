# server_env/config/config_types.py
"""Enumerated values accepted by LOG_LEVEL and ENVIRONMENT."""

from enum import Enum
import logging


class EnvLogLevel(str, Enum):
    """LOG_LEVEL values. str subclass, so the value prints and serializes as-is."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        return logging.getLevelName(self.value)

    def __str__(self) -> str:
        return self.value


class Environment(str, Enum):
    """ENVIRONMENT values; production disallows DEBUG logging."""

    DEVELOPMENT = "development"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"

    @property
    def is_production(self) -> bool:
        return self is Environment.PRODUCTION

    def __str__(self) -> str:
        return self.value


__all__ = ["EnvLogLevel", "Environment"]
