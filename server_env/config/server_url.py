# server_env/config/server_url.py
"""
Public base URL of the running instance.
"""

from typing import Optional
from server_env.api_error import ConfigurationError
from .env_config import EnvProvider, get_env, missing_message

SERVER_URL_ENV_KEY = "SERVER_URL"
VERCEL_URL_ENV_KEY = "VERCEL_URL"
VERCEL_URL_PROTOCOL = "https://"


def get_server_url(*, env: Optional[EnvProvider] = None) -> str:
    """
    Resolve the externally reachable base URL.

    SERVER_URL wins whenever it is set and is returned unchanged (custom
    domains, protocol included). Otherwise the platform-provided VERCEL_URL,
    a bare host, is prefixed with https://.

    Raises:
        ConfigurationError: "SERVER_URL is not set" when neither yields a value
    """
    server_url = get_env(SERVER_URL_ENV_KEY, is_required=False, env=env)
    if server_url:
        return server_url

    vercel_url = get_env(VERCEL_URL_ENV_KEY, is_required=False, env=env)
    if vercel_url:
        return f"{VERCEL_URL_PROTOCOL}{vercel_url}"

    raise ConfigurationError(
        missing_message(SERVER_URL_ENV_KEY), variable=SERVER_URL_ENV_KEY
    )


__all__ = [
    "SERVER_URL_ENV_KEY",
    "VERCEL_URL_ENV_KEY",
    "VERCEL_URL_PROTOCOL",
    "get_server_url",
]
