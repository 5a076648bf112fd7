# src/buildflags/logs.py

import logging
from typing import cast

from apathetic_logging import (
    Logger,
    registerDefaultLogLevel,
    registerLogger,
    registerLogLevelEnvVars,
)

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE


class AppLogger(Logger):
    """Buildflags logger; every module logs through the one named after the package."""


# --- Logger initialization ---------------------------------------------------

# Must run before any loggers are created so they use AppLogger.
logging.setLoggerClass(AppLogger)
AppLogger.extendLoggingModule()

# BUILDFLAGS_LOG_LEVEL wins over the generic LOG_LEVEL
registerLogLevelEnvVars(
    [f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL]
)
registerDefaultLogLevel(DEFAULT_LOG_LEVEL)
registerLogger(PROGRAM_PACKAGE)

_APP_LOGGER = cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))


# --- Convenience utils -------------------------------------------------------


def getAppLogger() -> AppLogger:  # noqa: N802
    """Return the configured app logger."""
    return _APP_LOGGER
