# server_env/__init__.py
"""
Environment configuration accessors for the server process.
"""

from .api_error import ConfigurationError
from .config import get_env, require_env, get_server_url

__all__ = ["ConfigurationError", "get_env", "require_env", "get_server_url"]
