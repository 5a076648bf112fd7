# src/buildflags/flags/flag_resolve.py

from collections.abc import Iterable, Iterator, Sequence

from apathetic_utils import plural

from buildflags.constants import COMMAND_ALL, DID_YOU_MEAN_THRESHOLD
from buildflags.logs import getAppLogger
from buildflags.utils import closest_match

from .flag_catalog import index_catalog
from .flag_messages import build_active_flags_message, build_unknown_flags_message
from .flag_types import (
    ExecutionContext,
    FlagDefinition,
    FlagResolution,
    UnknownFlag,
    UserSelections,
)


# --------------------------------------------------------------------------- #
# Individual steps
# --------------------------------------------------------------------------- #


def suggest_flag(name: str, catalog: Sequence[FlagDefinition]) -> str | None:
    """Closest catalog name to `name`, if it is close enough to suggest."""
    candidate, distance = closest_match(name, (flag.name for flag in catalog))
    if candidate is None or distance is None:
        return None
    return candidate if distance < DID_YOU_MEAN_THRESHOLD else None


def find_unknown_flags(
    catalog: Sequence[FlagDefinition],
    selections: UserSelections,
) -> list[UnknownFlag]:
    """Selection keys missing from the catalog, in selection order."""
    known = index_catalog(catalog)
    unknown: list[UnknownFlag] = []
    for name in selections:
        if name in known or not name:
            continue
        unknown.append(UnknownFlag(name=name, did_you_mean=suggest_flag(name, catalog)))
    return unknown


def select_enabled_flags(
    catalog: Sequence[FlagDefinition],
    selections: UserSelections,
) -> list[FlagDefinition]:
    """Catalog flags switched on by the user, in catalog order."""
    return [flag for flag in catalog if selections.get(flag.name)]


def filter_for_ci(
    flags: Iterable[FlagDefinition], context: ExecutionContext
) -> list[FlagDefinition]:
    if not context.is_ci:
        return list(flags)
    return [flag for flag in flags if not flag.no_ci]


def filter_for_command(
    flags: Iterable[FlagDefinition], context: ExecutionContext
) -> list[FlagDefinition]:
    return [
        flag
        for flag in flags
        if flag.command in (COMMAND_ALL, context.executing_command)
    ]


def dedupe_flags(flags: Iterable[FlagDefinition]) -> list[FlagDefinition]:
    """Drop repeated names, keeping first occurrences."""
    seen: set[str] = set()
    unique: list[FlagDefinition] = []
    for flag in flags:
        if flag.name not in seen:
            seen.add(flag.name)
            unique.append(flag)
    return unique


def add_included_flags(
    enabled: Sequence[FlagDefinition],
    catalog: Sequence[FlagDefinition],
) -> list[FlagDefinition]:
    """Append every flag reachable through `included_flags`.

    Depth-first, pre-order, starting from each enabled flag in turn.
    A flag's includes are expanded once, so cycles terminate.
    Included flags skip the CI and command filters.
    """
    logger = getAppLogger()
    index = index_catalog(catalog)
    result = list(enabled)
    expanded: set[str] = set()

    for root in enabled:
        if root.name in expanded:
            continue
        expanded.add(root.name)
        stack: list[Iterator[str]] = [iter(root.included_flags)]
        while stack:
            included_name = next(stack[-1], None)
            if included_name is None:
                stack.pop()
                continue
            included = index.get(included_name)
            if included is None:
                logger.trace(
                    "[add_included_flags] %s includes unknown flag %s",
                    root.name,
                    included_name,
                )
                continue
            result.append(included)
            if included.name not in expanded:
                expanded.add(included.name)
                stack.append(iter(included.included_flags))

    return dedupe_flags(result)


# --------------------------------------------------------------------------- #
# Entry point
# --------------------------------------------------------------------------- #


def resolve_flags(
    catalog: Sequence[FlagDefinition],
    selections: UserSelections | None,
    context: ExecutionContext | None = None,
) -> FlagResolution:
    """Work out which flags are active and describe the outcome.

    Never raises on odd input: unknown selections become a warning,
    unresolvable includes are skipped.
    """
    logger = getAppLogger()
    if context is None:
        context = ExecutionContext.from_environment()
    if selections is None:
        selections = {}
    catalog = list(catalog)

    logger.trace(
        "[resolve_flags] %d catalog flag%s, %d selection%s, command=%s, ci=%s",
        len(catalog),
        plural(catalog),
        len(selections),
        plural(selections),
        context.executing_command,
        context.is_ci,
    )

    unknown = find_unknown_flags(catalog, selections)

    enabled = select_enabled_flags(catalog, selections)
    enabled = filter_for_ci(enabled, context)
    enabled = filter_for_command(enabled, context)
    enabled = add_included_flags(enabled, catalog)

    logger.debug(
        "Enabled flag%s: %s",
        plural(enabled),
        ", ".join(flag.name for flag in enabled) or "(none)",
    )

    return FlagResolution(
        enabled=enabled,
        warning_text=build_unknown_flags_message(unknown),
        info_text=build_active_flags_message(enabled, catalog, context),
        unknown=unknown,
    )
