# server_env/config/initialize_config.py
"""
Configuration initialization module.

Handles the complete application configuration lifecycle.
"""
from typing import Optional, List
from pydantic import ValidationError
from server_env.api_error import ConfigurationError
from .app_config import AppConfig, load_app_config
from .env_config import EnvProvider
from .structlog_config import configure_structlog, get_logger


_config: Optional[AppConfig] = None


def _format_validation_error(e: ValidationError) -> str:
    errors: List[str] = []
    for error in e.errors():
        field = ".".join(str(x) for x in error["loc"])
        errors.append(f"{field}: {error['msg']}")
    return "Configuration validation failed:\n" + "\n".join(
        f"  - {err}" for err in errors
    )


def initialize_config(env: Optional[EnvProvider] = None) -> AppConfig:
    """
    Initialize and validate all application configuration.

    This MUST be called once at application startup before get_config().

    Args:
        env: Mapping to read from instead of os.environ

    Returns:
        The stored AppConfig

    Raises:
        ConfigurationError: If configuration is invalid or missing
    """
    global _config

    try:
        config = load_app_config(env)
    except ValidationError as e:
        # Convert Pydantic errors to a single ConfigurationError
        raise ConfigurationError(_format_validation_error(e)) from e

    try:
        configure_structlog(config.logging.level_int)
    except RuntimeError as e:
        # Log level is fixed for the life of the process
        raise ConfigurationError(
            f"LOG_LEVEL cannot change after startup: {e}", variable="LOG_LEVEL"
        ) from e

    logger = get_logger(__name__)
    if _config is not None:
        logger.warning("Configuration already initialized, replacing")
    _config = config

    logger.info(
        "Configuration loaded",
        environment=config.environment.value,
        server_url=config.server_url,
        log_level=config.logging.level_value,
    )
    logger.debug("Configuration snapshot", config=config.to_dict_safe())
    return config


def get_config() -> AppConfig:
    """
    Get validated application configuration.

    Raises:
        RuntimeError: If not initialized
    """
    if _config is None:
        raise RuntimeError(
            "Configuration not initialized. Call initialize_config() at startup."
        )
    return _config


def reset_config() -> None:
    """Drop the stored configuration. FOR TESTING ONLY."""
    global _config
    _config = None


__all__ = ["initialize_config", "get_config", "reset_config"]
