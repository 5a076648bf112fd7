# tests/utils/flags.py

import json
from pathlib import Path
from typing import Any

import buildflags.flags as mod_flags


def make_flag(name: str, **kwargs: Any) -> mod_flags.FlagDefinition:
    """Build a FlagDefinition with a default description of its lowercase name."""
    kwargs.setdefault("description", name.lower())
    if "included_flags" in kwargs:
        kwargs["included_flags"] = tuple(kwargs["included_flags"])
    return mod_flags.FlagDefinition(name=name, **kwargs)


def make_context(
    command: str | None = "build",
    *,
    is_ci: bool = False,
    enable_color: bool = False,
    enable_links: bool = False,
) -> mod_flags.ExecutionContext:
    """Explicit context so tests never depend on the environment."""
    return mod_flags.ExecutionContext(
        executing_command=command,
        is_ci=is_ci,
        enable_color=enable_color,
        enable_links=enable_links,
    )


def write_config_file(
    config_path: Path,
    *,
    flags: dict[str, Any] | None = None,
    catalog: list[dict[str, Any]] | None = None,
    **extra: Any,
) -> None:
    """Write a JSON config with the given flag selections and catalog."""
    data: dict[str, Any] = dict(extra)
    if flags is not None:
        data["flags"] = flags
    if catalog is not None:
        data["catalog"] = catalog
    config_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
