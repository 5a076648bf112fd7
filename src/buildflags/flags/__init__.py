# src/buildflags/flags/__init__.py

"""Feature-flag catalog handling and resolution for buildflags.

This module provides catalog parsing, config loading, resolution, and
the messages describing the result.
"""

from .flag_catalog import index_catalog, load_catalog, parse_catalog, parse_flag
from .flag_config import (
    extract_selections,
    find_config,
    load_and_parse_config,
    load_config,
    parse_config,
)
from .flag_messages import (
    build_active_flags_message,
    build_unknown_flags_message,
    format_flag_line,
)
from .flag_resolve import (
    add_included_flags,
    dedupe_flags,
    filter_for_ci,
    filter_for_command,
    find_unknown_flags,
    resolve_flags,
    select_enabled_flags,
    suggest_flag,
)
from .flag_types import (
    ExecutionContext,
    FlagConfig,
    FlagDefinition,
    FlagResolution,
    FlagsConfig,
    UnknownFlag,
    UserSelections,
)


__all__ = [  # noqa: RUF022
    # flag_catalog
    "index_catalog",
    "load_catalog",
    "parse_catalog",
    "parse_flag",
    # flag_config
    "extract_selections",
    "find_config",
    "load_and_parse_config",
    "load_config",
    "parse_config",
    # flag_messages
    "build_active_flags_message",
    "build_unknown_flags_message",
    "format_flag_line",
    # flag_resolve
    "add_included_flags",
    "dedupe_flags",
    "filter_for_ci",
    "filter_for_command",
    "find_unknown_flags",
    "resolve_flags",
    "select_enabled_flags",
    "suggest_flag",
    # flag_types
    "ExecutionContext",
    "FlagConfig",
    "FlagDefinition",
    "FlagResolution",
    "FlagsConfig",
    "UnknownFlag",
    "UserSelections",
]
