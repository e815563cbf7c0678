# server_env/config/env_config.py
"""
Environment variable reader.

Every reader takes an optional ``env`` mapping so callers (and tests) can
swap the process environment for a plain dict.
"""

import os
from typing import Mapping, Optional, cast
from server_env.api_error import ConfigurationError

EnvProvider = Mapping[str, str]


def _provider(env: Optional[EnvProvider]) -> EnvProvider:
    return os.environ if env is None else env


def missing_message(name: str) -> str:
    return f"{name} is not set"


def get_env(
    name: str,
    *,
    is_required: bool = True,
    allow_empty: bool = False,
    env: Optional[EnvProvider] = None,
) -> Optional[str]:
    """
    Read an environment variable and enforce presence rules.

    Args:
        name: Variable name
        is_required: Raise when the variable is absent
        allow_empty: Accept an explicitly empty value for a required variable
        env: Mapping to read from instead of os.environ

    Returns:
        The raw string value, "" for an accepted empty value, or None when an
        optional variable is absent.

    Raises:
        ConfigurationError: "<name> is not set" when a required variable is
            absent, or empty without allow_empty.
    """
    value = _provider(env).get(name)

    if value is None:
        if is_required:
            raise ConfigurationError(missing_message(name), variable=name)
        return None

    # Optional reads never reject an empty value
    if value == "" and is_required and not allow_empty:
        raise ConfigurationError(missing_message(name), variable=name)

    return value


def require_env(name: str, *, env: Optional[EnvProvider] = None) -> str:
    """
    Get required, non-empty environment variable or raise immediately.
    """
    # Defaults reject both absent and empty values
    return cast(str, get_env(name, env=env))


__all__ = ["EnvProvider", "get_env", "require_env", "missing_message"]
