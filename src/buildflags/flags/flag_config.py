# src/buildflags/flags/flag_config.py


import argparse
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from apathetic_utils import load_jsonc, load_toml, remove_path_in_error_message

from buildflags.constants import CONFIG_SUFFIXES
from buildflags.logs import getAppLogger
from buildflags.meta import PROGRAM_CONFIG

from .flag_types import FlagsConfig


CONFIG_KEYS = {"flags", "catalog", "command", "log_level"}


def find_config(
    args: argparse.Namespace,
    cwd: Path,
    *,
    missing_level: str = "error",
) -> Path | None:
    """Locate a configuration file.

    missing_level: log-level for failing to find a configuration file.

    Search order:
      1. Explicit path from CLI (--config)
      2. .{PROGRAM_CONFIG}.jsonc, .json, .toml in cwd, then each parent

    Returns the first matching path, or None if no config was found.
    """
    logger = getAppLogger()

    if not isinstance(logging.getLevelName(missing_level.upper()), int):
        logger.error("Invalid log level name in find_config(): %s", missing_level)
        missing_level = "error"

    # --- 1. Explicit config path ---
    if getattr(args, "config", None):
        config = Path(args.config).expanduser().resolve()
        logger.trace(f"[find_config] Checking explicit path: {config}")
        if not config.exists():
            xmsg = f"Specified config file not found: {config}"
            raise FileNotFoundError(xmsg)
        if config.is_dir():
            xmsg = f"Specified config path is a directory, not a file: {config}"
            raise ValueError(xmsg)
        return config

    # --- 2. Default candidates, closest directory first ---
    for directory in (cwd, *cwd.parents):
        found = [
            directory / f".{PROGRAM_CONFIG}{suffix}"
            for suffix in CONFIG_SUFFIXES
            if (directory / f".{PROGRAM_CONFIG}{suffix}").is_file()
        ]
        if not found:
            continue
        if len(found) > 1:
            logger.warning(
                "Multiple config files detected (%s); using %s.",
                ", ".join(p.name for p in found),
                found[0].name,
            )
        return found[0]

    logger.logDynamic(missing_level, f"No config file found in {cwd} or parents")
    return None


def load_config(config_path: Path) -> dict[str, Any] | list[Any] | None:
    """Load raw configuration data from a .json, .jsonc or .toml file.

    Returns None for intentionally empty configs.
    """
    logger = getAppLogger()
    logger.trace(f"[load_config] Loading from {config_path} ({config_path.suffix})")

    try:
        if config_path.suffix == ".toml":
            return load_toml(config_path, required=True) or None
        return load_jsonc(config_path)
    except ValueError as e:
        clean_msg = remove_path_in_error_message(str(e), config_path)
        xmsg = (
            f"Error while loading configuration file '{config_path.name}': {clean_msg}"
        )
        raise ValueError(xmsg) from e


def parse_config(raw_config: Any) -> FlagsConfig | None:
    """Normalize the raw config into a FlagsConfig.

    A mapping of only booleans is shorthand for {"flags": {...}}.
    """
    if raw_config is None:
        return None

    if not isinstance(raw_config, Mapping):
        xmsg = (
            "Configuration root must be an object (mapping),"
            f" not {type(raw_config).__name__}"
        )
        raise TypeError(xmsg)

    if raw_config and all(isinstance(v, bool) for v in raw_config.values()):
        return cast("FlagsConfig", {"flags": dict(raw_config)})

    logger = getAppLogger()
    for key in raw_config:
        if key not in CONFIG_KEYS:
            logger.warning("Unknown key %r in configuration (ignored).", key)

    flags = raw_config.get("flags", {})
    if not isinstance(flags, Mapping):
        xmsg = f"`flags` must be an object (mapping), not {type(flags).__name__}"
        raise TypeError(xmsg)

    catalog = raw_config.get("catalog")
    if catalog is not None and not isinstance(catalog, list):
        xmsg = f"`catalog` must be a list, not {type(catalog).__name__}"
        raise TypeError(xmsg)

    parsed: dict[str, Any] = {"flags": dict(flags)}
    if catalog is not None:
        parsed["catalog"] = catalog
    for key in ("command", "log_level"):
        value = raw_config.get(key)
        if isinstance(value, str) and value:
            parsed[key] = value
    return cast("FlagsConfig", parsed)


def extract_selections(config: FlagsConfig | None) -> dict[str, bool]:
    """Return the user's name → bool selections from a parsed config."""
    if not config:
        return {}

    logger = getAppLogger()
    selections: dict[str, bool] = {}
    for name, value in config.get("flags", {}).items():
        if not isinstance(name, str):
            logger.debug("Skipping non-string flag key %r", name)
            continue
        if not isinstance(value, bool):
            logger.warning(
                "Flag %r should be true or false, got %r; treating it as %s.",
                name,
                value,
                bool(value),
            )
        selections[name] = bool(value)
    return selections


def load_and_parse_config(
    args: argparse.Namespace,
    cwd: Path,
    *,
    missing_level: str = "info",
) -> tuple[Path, FlagsConfig] | None:
    """Find, load and parse the config. Returns None when there is none."""
    config_path = find_config(args, cwd, missing_level=missing_level)
    if config_path is None:
        return None

    config = parse_config(load_config(config_path))
    if config is None:
        getAppLogger().info("Config %s is empty.", config_path.name)
        return None
    return config_path, config
