# src/buildflags/__init__.py

"""Buildflags — resolve a build tool's feature flags.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use by the build tool it serves.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()                → CLI entrypoint
    - resolve_flags()       → Catalog + selections + context → FlagResolution
    - load_catalog()        → Read a flag catalog file
    - load_and_parse_config() → Find and read the user's flag selections
"""

from .cli import main
from .constants import (
    COMMAND_ALL,
    DEFAULT_ENV_EXECUTING_COMMAND,
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DID_YOU_MEAN_THRESHOLD,
)
from .flags import (
    ExecutionContext,
    FlagConfig,
    FlagDefinition,
    FlagResolution,
    FlagsConfig,
    UnknownFlag,
    UserSelections,
    extract_selections,
    find_config,
    load_and_parse_config,
    load_catalog,
    load_config,
    parse_catalog,
    parse_config,
    resolve_flags,
)
from .logs import getAppLogger
from .meta import (
    PROGRAM_CONFIG,
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
)


__all__ = [  # noqa: RUF022
    # cli
    "main",
    # constants
    "COMMAND_ALL",
    "DEFAULT_ENV_EXECUTING_COMMAND",
    "DEFAULT_ENV_LOG_LEVEL",
    "DEFAULT_LOG_LEVEL",
    "DID_YOU_MEAN_THRESHOLD",
    # flags
    "ExecutionContext",
    "FlagConfig",
    "FlagDefinition",
    "FlagResolution",
    "FlagsConfig",
    "UnknownFlag",
    "UserSelections",
    "extract_selections",
    "find_config",
    "load_and_parse_config",
    "load_catalog",
    "load_config",
    "parse_catalog",
    "parse_config",
    "resolve_flags",
    # logs
    "getAppLogger",
    # meta
    "PROGRAM_CONFIG",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
]
