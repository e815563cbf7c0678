# server_env/api_error/config_error.py
from typing import Optional


class ConfigurationError(RuntimeError):
    """
    Raised when application configuration is invalid.

    Attributes:
        variable: Name of the offending environment variable, or None when
            the error aggregates several problems.
    """

    def __init__(self, message: str, variable: Optional[str] = None) -> None:
        self.message = message
        self.variable = variable
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), (self.message, self.variable))


__all__ = ["ConfigurationError"]
