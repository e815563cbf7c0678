# server_env/config/app_config.py
"""
Startup snapshot of the variables the server reads.

Values stay strings; this module only decides which variables are required
and which may be empty, then freezes the result.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, model_validator, SecretStr
from server_env.api_error import ConfigurationError
from .config_types import EnvLogLevel, Environment
from .env_config import EnvProvider, get_env, require_env
from .logging_config import LoggingConfig, load_logging_config
from .server_url import get_server_url

_default_environment = Environment.DEVELOPMENT


class SmtpConfig(BaseModel):
    """
    Outgoing mail settings.

    user/password must be present but may be empty for relays without auth.
    """

    host: Optional[str] = None
    port: Optional[str] = None
    from_address: Optional[str] = None
    user: str
    password: SecretStr

    model_config = {"frozen": True}


class AppConfig(BaseModel):
    """
    Complete application configuration.

    Loaded from environment variables and validated at startup. Invalid
    configuration fails fast with a message naming the variable.
    """

    environment: Environment
    logging: LoggingConfig
    server_url: str = Field(..., min_length=1)

    database_url: SecretStr
    direct_url: Optional[SecretStr] = None
    session_secret: SecretStr

    admin_email: Optional[str] = None
    stripe_webhook_secret: SecretStr
    disable_sso: str
    smtp: SmtpConfig

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_production_settings(self) -> "AppConfig":
        if self.environment.is_production:
            if self.logging.log_level == EnvLogLevel.DEBUG:
                raise ValueError("DEBUG log level not allowed in production")
        return self

    def to_dict_safe(self) -> dict[str, Any]:
        """Convert to dict with sensitive data masked (safe for logging)."""
        data = self.model_dump(mode="json")
        data["logging"] = self.logging.level_value
        return data


def load_environment(env: Optional[EnvProvider] = None) -> Environment:
    env_str = get_env("ENVIRONMENT", is_required=False, env=env)
    if not env_str:
        return _default_environment

    try:
        return Environment(env_str.lower())
    except ValueError as exc:
        valid_envs = [e.value for e in Environment]
        raise ConfigurationError(
            f"Invalid ENVIRONMENT: {env_str}. Must be one of: {valid_envs}",
            variable="ENVIRONMENT",
        ) from exc


def load_smtp_config(env: Optional[EnvProvider] = None) -> SmtpConfig:
    """
    Environment variables:
    Optional:
    - SMTP_HOST, SMTP_PORT, SMTP_FROM
    Required, may be empty:
    - SMTP_USER, SMTP_PWD
    """
    return SmtpConfig(
        host=get_env("SMTP_HOST", is_required=False, env=env),
        port=get_env("SMTP_PORT", is_required=False, env=env),
        from_address=get_env("SMTP_FROM", is_required=False, env=env),
        user=get_env("SMTP_USER", allow_empty=True, env=env),
        password=get_env("SMTP_PWD", allow_empty=True, env=env),
    )


def load_app_config(env: Optional[EnvProvider] = None) -> AppConfig:
    """
    Load complete application configuration.

    Environment variables:
    Required:
    - DATABASE_URL, SESSION_SECRET
    - SERVER_URL (or VERCEL_URL as fallback)
    Required, may be empty:
    - STRIPE_WEBHOOK_ENDPOINT_SECRET, DISABLE_SSO
    Optional:
    - ENVIRONMENT (default: development), LOG_LEVEL (default: INFO)
    - DIRECT_URL, ADMIN_EMAIL

    Raises:
        ValidationError: If configuration is invalid
        ConfigurationError: If required env vars are missing
    """
    direct_url = get_env("DIRECT_URL", is_required=False, env=env)

    return AppConfig(
        environment=load_environment(env),
        logging=load_logging_config(env=env),
        server_url=get_server_url(env=env),
        database_url=require_env("DATABASE_URL", env=env),
        direct_url=direct_url or None,
        session_secret=require_env("SESSION_SECRET", env=env),
        admin_email=get_env("ADMIN_EMAIL", is_required=False, env=env) or None,
        stripe_webhook_secret=get_env(
            "STRIPE_WEBHOOK_ENDPOINT_SECRET", allow_empty=True, env=env
        ),
        disable_sso=get_env("DISABLE_SSO", allow_empty=True, env=env),
        smtp=load_smtp_config(env),
    )


__all__ = [
    "AppConfig",
    "SmtpConfig",
    "load_app_config",
    "load_environment",
    "load_smtp_config",
]
