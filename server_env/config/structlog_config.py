# server_env/config/structlog_config.py
"""
Structlog setup for the server process.

Nothing here runs on import: configure_structlog() installs the processor
chain and the Rich excepthook the first time it is called.
"""
import sys
from types import TracebackType
from typing import Callable, Optional, Type
import structlog
from rich.traceback import install as install_rich_traceback

_ExceptHook = Callable[
    [Type[BaseException], BaseException, Optional[TracebackType]], object
]

_log_level: Optional[int] = None
_previous_excepthook: Optional[_ExceptHook] = None


def _processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.RichTracebackFormatter(
                show_locals=False,
                width=None,
            ),
        ),
    ]


def configure_structlog(log_level: int) -> None:
    """
    Configure structlog with the specified log level.

    Calling again with the same level is a no-op.

    Args:
        log_level: Numeric logging level (e.g., logging.INFO)

    Raises:
        RuntimeError: If already configured with a different level
    """
    global _log_level, _previous_excepthook

    if _log_level is not None:
        if _log_level == log_level:
            return
        raise RuntimeError(
            f"structlog already configured. "
            f"Current level: {_log_level}, attempted: {log_level}"
        )

    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _previous_excepthook = install_rich_traceback(
        show_locals=False, width=None, extra_lines=3
    )
    _log_level = log_level


def get_logger(name: str = "server_env") -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Raises:
        RuntimeError: If configure_structlog() has not been called yet
    """
    if _log_level is None:
        raise RuntimeError(
            "structlog not configured. "
            "Call configure_structlog() at application startup."
        )
    return structlog.get_logger(name)


def is_configured() -> bool:
    return _log_level is not None


def configured_level() -> Optional[int]:
    return _log_level


def reset_structlog() -> None:
    """Undo configure_structlog(), restoring the excepthook. FOR TESTING ONLY."""
    global _log_level, _previous_excepthook

    if _previous_excepthook is not None:
        sys.excepthook = _previous_excepthook
        _previous_excepthook = None
    _log_level = None
    structlog.reset_defaults()


__all__ = [
    "configure_structlog",
    "configured_level",
    "get_logger",
    "is_configured",
    "reset_structlog",
]
