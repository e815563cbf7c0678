# server_env/config/logging_config.py
from dataclasses import dataclass
from typing import Optional
from .env_config import EnvProvider, get_env
from .config_types import EnvLogLevel
from server_env.api_error import ConfigurationError

_default_log_level_env_key = "LOG_LEVEL"
_default_log_level = EnvLogLevel.INFO


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    log_level: EnvLogLevel

    @property
    def level_value(self) -> str:
        """Get string value of log level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
    env: Optional[EnvProvider] = None,
) -> LoggingConfig:
    """
    Load logging configuration from environment.

    Args:
        log_level_env_key: Environment variable name
        env: Mapping to read from instead of os.environ

    Returns:
        LoggingConfig instance, INFO when the variable is unset or empty

    Raises:
        ConfigurationError: If LOG_LEVEL is invalid
    """
    raw = get_env(log_level_env_key, is_required=False, env=env)
    if not raw:
        return LoggingConfig(log_level=_default_log_level)

    try:
        return LoggingConfig(log_level=EnvLogLevel(raw.upper()))
    except ValueError as exc:
        valid_levels = ", ".join(level.value for level in EnvLogLevel)
        raise ConfigurationError(
            f"Invalid logging configuration. "
            f"{log_level_env_key} must be one of [{valid_levels}]",
            variable=log_level_env_key,
        ) from exc


__all__ = [
    "LoggingConfig",
    "load_logging_config",
]
