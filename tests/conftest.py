# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator

import pytest
from apathetic_logging import makeSafeTrace
from apathetic_utils import CI_ENV_VARS

import buildflags.logs as mod_logs
import buildflags.meta as mod_meta
from tests.utils import DEFAULT_TEST_LOG_LEVEL
from tests.utils.log_fixtures import (
    direct_logger,
    module_logger,
)


# These fixtures are intentionally re-exported so pytest can discover them.
__all__ = [
    "direct_logger",
    "module_logger",
]

SAFE_TRACE = makeSafeTrace("🚩")

# Variables that would otherwise leak the developer's or runner's environment
_ENV_TO_CLEAR = (
    *CI_ENV_VARS,
    "CI",
    "GITHUB_ACTIONS",
    "EXECUTING_COMMAND",
    f"{mod_meta.PROGRAM_ENV}_EXECUTING_COMMAND",
    "LOG_LEVEL",
    f"{mod_meta.PROGRAM_ENV}_LOG_LEVEL",
    "FORCE_COLOR",
    "FORCE_HYPERLINK",
)


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from a local, non-CI, uncolored environment."""
    for var in _ENV_TO_CLEAR:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger to DEFAULT_TEST_LOG_LEVEL around each test.

    The app logger is a module-level singleton that persists between tests.
    """
    logger = mod_logs.getAppLogger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    logger.enable_color = False
    SAFE_TRACE("reset_logger_level", f"level={logger.levelName}")
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    logger.enable_color = False
