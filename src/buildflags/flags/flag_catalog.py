# src/buildflags/flags/flag_catalog.py


from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from apathetic_utils import load_jsonc, load_toml, remove_path_in_error_message

from buildflags.constants import COMMAND_ALL
from buildflags.logs import getAppLogger

from .flag_types import FlagDefinition


# camelCase spellings used by JS-side catalogs
FIELD_ALIASES = {
    "no_ci": "noCi",
    "umbrella_issue": "umbrellaIssue",
    "included_flags": "includedFlags",
}
CATALOG_KEYS = {
    "name",
    "description",
    "command",
    "experimental",
    *FIELD_ALIASES,
    *FIELD_ALIASES.values(),
}


def _field(raw: Mapping[str, Any], key: str) -> Any:
    if key in raw:
        return raw[key]
    return raw.get(FIELD_ALIASES.get(key, key))


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _as_bool(value: Any) -> bool:
    # "false", 0 and friends mean "not set"; only a real true switches on
    return value is True


def _as_names(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(v for v in value if isinstance(v, str) and v)
    return ()


def parse_flag(raw: Any) -> FlagDefinition | None:
    """Normalize one catalog entry.

    Multi-word keys may be snake_case or camelCase (`no_ci` / `noCi`).
    Missing or mistyped fields fall back to "feature absent".
    Entries without a usable name are skipped (None).
    """
    if isinstance(raw, FlagDefinition):
        return raw

    logger = getAppLogger()
    if not isinstance(raw, Mapping):
        logger.debug("Skipping catalog entry of type %s", type(raw).__name__)
        return None

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        logger.debug("Skipping catalog entry without a name: %r", dict(raw))
        return None

    for key in raw:
        if key not in CATALOG_KEYS:
            logger.warning("Unknown key %r in catalog entry %s (ignored).", key, name)

    for key in ("experimental", "no_ci"):
        value = _field(raw, key)
        if value is not None and not isinstance(value, bool):
            logger.warning(
                "Catalog flag %s: %r should be true or false, got %r; treating it"
                " as false.",
                name,
                key,
                value,
            )

    umbrella_issue = _field(raw, "umbrella_issue")
    return FlagDefinition(
        name=name,
        description=_as_str(raw.get("description")),
        command=_as_str(raw.get("command"), COMMAND_ALL) or COMMAND_ALL,
        experimental=_as_bool(raw.get("experimental")),
        no_ci=_as_bool(_field(raw, "no_ci")),
        umbrella_issue=umbrella_issue
        if isinstance(umbrella_issue, str) and umbrella_issue
        else None,
        included_flags=_as_names(_field(raw, "included_flags")),
    )


def parse_catalog(raw_entries: Iterable[Any] | None) -> list[FlagDefinition]:
    if not raw_entries:
        return []
    catalog: list[FlagDefinition] = []
    for raw in raw_entries:
        flag = parse_flag(raw)
        if flag is not None:
            catalog.append(flag)
    return catalog


def index_catalog(catalog: Iterable[FlagDefinition]) -> dict[str, FlagDefinition]:
    """Map names to flags; the first of several same-named flags wins."""
    index: dict[str, FlagDefinition] = {}
    for flag in catalog:
        index.setdefault(flag.name, flag)
    return index


def load_catalog(path: Path) -> list[FlagDefinition]:
    """Load a catalog file (.json, .jsonc or .toml).

    The root is either a list of entries or a mapping with a `flags` list.
    """
    logger = getAppLogger()
    logger.trace(f"[load_catalog] Loading from {path}")

    try:
        raw = (
            load_toml(path, required=True)
            if path.suffix == ".toml"
            else load_jsonc(path)
        )
    except ValueError as e:
        clean_msg = remove_path_in_error_message(str(e), path)
        xmsg = f"Error while loading flag catalog '{path.name}': {clean_msg}"
        raise ValueError(xmsg) from e

    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = raw.get("flags", [])
    if not isinstance(raw, list):
        xmsg = (
            f"Flag catalog in {path.name} must be a list of flags,"
            f" not {type(raw).__name__}"
        )
        raise TypeError(xmsg)

    catalog = parse_catalog(raw)
    logger.debug("Loaded %d flag(s) from %s", len(catalog), path.name)
    return catalog
