"""
Pytest configuration for the hrw test suite.

Pins logging to error so ranking calls stay quiet, and discards the
shared default ranker so every test configures it from a clean
environment.
"""

import pytest

from hrw.env import Env
from hrw.logging import LoggingConfig
from hrw.ranking import reset_default_ranker


def _reset_logging(config: LoggingConfig):
    config.update(log_level="error", log_output="stderr", log_format="text")
    for logger_name in config.disabled_loggers:
        config.enable(logger_name)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for envar_name in Env.types_map():
        monkeypatch.delenv(envar_name, raising=False)

    # Keep load_env away from any .env in the working directory.
    monkeypatch.chdir(tmp_path)

    # Logging settings are shared across threads and tests.
    config = LoggingConfig()
    _reset_logging(config)
    reset_default_ranker()
    yield
    reset_default_ranker()
    _reset_logging(config)


@pytest.fixture
def quiet_env() -> Env:
    return Env(HRW_LOG_LEVEL="error")
