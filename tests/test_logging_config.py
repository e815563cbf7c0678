# tests/test_logging_config.py
import logging
import subprocess
import sys
from pathlib import Path

import pytest

from server_env.api_error import ConfigurationError
from server_env.config import (
    EnvLogLevel,
    configure_structlog,
    configured_level,
    get_logger,
    is_configured,
    load_logging_config,
    reset_structlog,
)

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_defaults_to_info_when_unset():
    config = load_logging_config(env={})
    assert config.log_level is EnvLogLevel.INFO
    assert config.level_int == logging.INFO


def test_defaults_to_info_when_empty():
    assert load_logging_config(env={"LOG_LEVEL": ""}).log_level is EnvLogLevel.INFO


def test_level_is_case_insensitive():
    config = load_logging_config(env={"LOG_LEVEL": "debug"})
    assert config.level_value == "DEBUG"
    assert config.level_int == logging.DEBUG


def test_custom_env_key():
    config = load_logging_config("APP_LOG_LEVEL", env={"APP_LOG_LEVEL": "error"})
    assert config.log_level is EnvLogLevel.ERROR


def test_invalid_level_lists_valid_levels():
    with pytest.raises(ConfigurationError, match=r"LOG_LEVEL must be one of \[DEBUG") as exc_info:
        load_logging_config(env={"LOG_LEVEL": "verbose"})

    assert exc_info.value.variable == "LOG_LEVEL"


def test_get_logger_before_configure_raises():
    assert not is_configured()
    with pytest.raises(RuntimeError, match="structlog not configured"):
        get_logger("test")


def test_configure_is_idempotent_for_same_level():
    configure_structlog(logging.INFO)
    configure_structlog(logging.INFO)
    assert is_configured()


def test_reconfigure_with_other_level_raises():
    configure_structlog(logging.INFO)
    with pytest.raises(RuntimeError, match="already configured"):
        configure_structlog(logging.DEBUG)


def test_logger_writes_to_stderr(capsys):
    configure_structlog(logging.INFO)

    logger = get_logger("test")
    logger.info("hello", user="alice")
    logger.debug("hidden")

    err = capsys.readouterr().err
    assert "hello" in err
    assert "user=alice" in err
    assert "hidden" not in err


def test_import_leaves_excepthook_alone():
    code = (
        "import sys\n"
        "hook = sys.excepthook\n"
        "import server_env\n"
        "import server_env.config.structlog_config\n"
        "print(sys.excepthook is hook)\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout.strip() == "True"


def test_configure_installs_and_reset_restores_excepthook():
    hook = sys.excepthook

    configure_structlog(logging.INFO)
    assert sys.excepthook is not hook

    reset_structlog()
    assert sys.excepthook is hook
    assert configured_level() is None
